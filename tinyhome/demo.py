# TinyHome Module
# -*- coding: utf-8 -*-
"""
 TinyHome demonstration

 Builds a light, a thermostat and a door through the factory, puts each
 behind a DeviceProxy, switches them all on and prints the results.
"""

import logging

from .core import DeviceProxy, DEVICE_LIGHT, DEVICE_THERMOSTAT, DEVICE_DOOR
from .factory import create_device
from .SmartHome import SmartHomeSystem

log = logging.getLogger(__name__)


def run_demo():
    """Run the demonstration and return the SmartHomeSystem it built"""
    system = SmartHomeSystem()

    light = create_device(1, DEVICE_LIGHT)
    thermostat = create_device(2, DEVICE_THERMOSTAT)
    door = create_device(3, DEVICE_DOOR)

    system.add_device(DeviceProxy(light))
    system.add_device(DeviceProxy(thermostat))
    system.add_device(DeviceProxy(door))

    system.turn_on_device(1)
    system.turn_on_device(2)
    system.turn_on_device(3)

    system.show_status()

    system.set_schedule(1, "06:00", "Turn On")
    system.automate_task("temperature > 75", "turnOff(1)")

    log.debug("demo finished with %d devices", len(system))
    return system
