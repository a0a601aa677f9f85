# TinyHome Module
# -*- coding: utf-8 -*-
"""
 TinyHome Device Factory

 Functions
    create_device(dev_id, dev_type)    # Build a new device from a type tag

 Type tags (case-insensitive)
    'light'       -> LightDevice(dev_id)
    'thermostat'  -> ThermostatDevice(dev_id, DEFAULT_TEMPERATURE)
    'door'        -> DoorDevice(dev_id)
"""

import logging

from .core import DeviceTypeError, DEVICE_LIGHT, DEVICE_THERMOSTAT, DEVICE_DOOR, DEFAULT_TEMPERATURE
from .LightDevice import LightDevice
from .ThermostatDevice import ThermostatDevice
from .DoorDevice import DoorDevice

log = logging.getLogger(__name__)

DEVICE_TYPES = {
    DEVICE_LIGHT: LightDevice,
    DEVICE_THERMOSTAT: lambda dev_id: ThermostatDevice(dev_id, DEFAULT_TEMPERATURE),
    DEVICE_DOOR: DoorDevice,
}


def create_device(dev_id, dev_type):
    """Return a new device of type `dev_type` with ID `dev_id`

    Parameters:
        dev_id = Device ID for the new device
        dev_type = One of 'light', 'thermostat' or 'door', any case

    Raises:
        DeviceTypeError if dev_type is not one of the above
    """
    if not isinstance(dev_type, str) or dev_type.lower() not in DEVICE_TYPES:
        log.debug("rejecting device type %r for device %r", dev_type, dev_id)
        raise DeviceTypeError(dev_type)

    device = DEVICE_TYPES[dev_type.lower()](dev_id)
    log.debug("created %r", device)
    return device
