# TinyHome Module
# -*- coding: utf-8 -*-

# Device Type Tags (case-insensitive when passed to create_device)
DEVICE_LIGHT = 'light'
DEVICE_THERMOSTAT = 'thermostat'
DEVICE_DOOR = 'door'

# Device Defaults
DEFAULT_TEMPERATURE = 70    # Degrees a thermostat starts at when built by the factory
