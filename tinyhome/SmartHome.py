# TinyHome Smart Home System
# -*- coding: utf-8 -*-
"""
 TinyHome - Registry of devices and schedules

 Classes
    SmartHomeSystem()

 Functions
    SmartHomeSystem:
        add_device(device)                 # Register a device (no duplicate check)
        remove_device(dev_id)              # Drop every device with this ID
        turn_on_device(dev_id)             # turn_on() every device with this ID
        turn_off_device(dev_id)            # turn_off() every device with this ID
        set_schedule(dev_id, time, action) # Record a schedule (never fired)
        show_status()                      # Print status of every device
        automate_task(condition, action)   # Print an automation rule (never evaluated)
        get_devices(dev_id)                # List of devices with this ID
        devices / schedules                # Read-only snapshots, insertion order
"""

import logging

from .Schedule import Schedule

log = logging.getLogger(__name__)


class SmartHomeSystem(object):
    """
    Owns the devices and schedules of one home.

    Devices are kept in insertion order. IDs are not required to be
    unique; operations by ID act on every matching device.

    len() is the device count, so a home with no devices is falsy.
    """

    def __init__(self):
        self._devices = []
        self._schedules = []

    @property
    def devices(self):
        return tuple(self._devices)

    @property
    def schedules(self):
        return tuple(self._schedules)

    def __len__(self):
        return len(self._devices)

    def get_devices(self, dev_id):
        return [d for d in self._devices if d.get_id() == dev_id]

    def add_device(self, device):
        self._devices.append(device)
        log.debug("added %r (%d devices)", device, len(self._devices))

    def remove_device(self, dev_id):
        before = len(self._devices)
        self._devices = [d for d in self._devices if d.get_id() != dev_id]
        log.debug("removed %d device(s) with id %r", before - len(self._devices), dev_id)

    def turn_on_device(self, dev_id):
        for device in self.get_devices(dev_id):
            device.turn_on()

    def turn_off_device(self, dev_id):
        for device in self.get_devices(dev_id):
            device.turn_off()

    def set_schedule(self, dev_id, time, action):
        schedule = Schedule(dev_id, time, action)
        print("Schedule added: " + str(schedule))
        self._schedules.append(schedule)
        return schedule

    def show_status(self):
        for device in self._devices:
            print(device.get_status())

    def automate_task(self, condition, action):
        print("Automated task: If %s then %s" % (condition, action))
