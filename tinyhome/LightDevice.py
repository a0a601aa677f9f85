# TinyHome Light Device
# -*- coding: utf-8 -*-
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Classes
    LightDevice(dev_id)
        dev_id (int): Device ID e.g. 1

 Functions
    LightDevice:
        turn_on()                      # Light goes on
        turn_off()                     # Light goes off
        get_status()                   # "Light 1 is On" / "Light 1 is Off"
"""

import logging

from .core import Device

log = logging.getLogger(__name__)


class LightDevice(Device):
    """
    Represents a simple on/off Smart Light.
    """

    def __init__(self, dev_id):
        super(LightDevice, self).__init__(dev_id)
        self._is_on = False

    @property
    def is_on(self):
        return self._is_on

    def turn_on(self):
        self._is_on = True
        log.debug("light %r on", self.id)
        print("Light %s is turned on." % self.id)

    def turn_off(self):
        self._is_on = False
        log.debug("light %r off", self.id)
        print("Light %s is turned off." % self.id)

    def get_status(self):
        return "Light %s is %s" % (self.id, "On" if self._is_on else "Off")

    def state(self):
        return {'id': self.id, 'is_on': self._is_on}
