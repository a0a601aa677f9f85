# TinyHome Module
# -*- coding: utf-8 -*-
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Classes
    LightDevice(dev_id)
    ThermostatDevice(dev_id, temperature=70)
    DoorDevice(dev_id)
    DeviceProxy(device)
    SmartHomeSystem()
    Schedule(device_id, time, action)

        dev_id (int): Device ID e.g. 1

 Functions
    create_device(dev_id, dev_type)    # dev_type is 'light', 'thermostat' or 'door'
    set_debug(toggle, color)           # Activate verbose debugging output

    Device
        turn_on()
        turn_off()
        get_status()
        get_id()
        state()                        # returns dict of current state

    ThermostatDevice
        set_temperature(temperature)

    DoorDevice
        lock()
        unlock()

    SmartHomeSystem
        add_device(device)
        remove_device(dev_id)
        turn_on_device(dev_id)
        turn_off_device(dev_id)
        set_schedule(dev_id, time, action)
        show_status()
        automate_task(condition, action)
"""

from .core import *
from .core import __version__
from .core import __author__

from .LightDevice import LightDevice
from .ThermostatDevice import ThermostatDevice
from .DoorDevice import DoorDevice
from .factory import create_device, DEVICE_TYPES
from .Schedule import Schedule
from .SmartHome import SmartHomeSystem

DeviceTypes = ["LightDevice", "ThermostatDevice", "DoorDevice"]
