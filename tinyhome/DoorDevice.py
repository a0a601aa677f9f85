# TinyHome Door Device
# -*- coding: utf-8 -*-
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Classes
    DoorDevice(dev_id)
        dev_id (int): Device ID e.g. 3

 Functions
    DoorDevice:
        lock()
        unlock()

    Device
        turn_on()                      # Same as unlock()
        turn_off()                     # Same as lock()
        get_status()                   # "Door 3 is Locked" / "Door 3 is Unlocked"

 Notes
    A door starts out locked.
"""

import logging

from .core import Device

log = logging.getLogger(__name__)


class DoorDevice(Device):
    """
    Represents a Smart Door Lock.
    """

    def __init__(self, dev_id):
        super(DoorDevice, self).__init__(dev_id)
        self._is_locked = True

    @property
    def is_locked(self):
        return self._is_locked

    def lock(self):
        self._is_locked = True
        log.debug("door %r locked", self.id)
        print("Door %s is locked." % self.id)

    def unlock(self):
        self._is_locked = False
        log.debug("door %r unlocked", self.id)
        print("Door %s is unlocked." % self.id)

    def turn_on(self):
        self.unlock()

    def turn_off(self):
        self.lock()

    def get_status(self):
        return "Door %s is %s" % (self.id, "Locked" if self._is_locked else "Unlocked")

    def state(self):
        return {'id': self.id, 'is_locked': self._is_locked}
