#!/usr/bin/env python3
"""
Tests for create_device()
"""

import unittest

from tinyhome import create_device, LightDevice, ThermostatDevice, DoorDevice
from tinyhome import DeviceTypeError, ERR_DEVTYPE, error_codes


class TestCreateDevice(unittest.TestCase):

    def test_known_types(self):
        cases = {
            'light': LightDevice,
            'thermostat': ThermostatDevice,
            'door': DoorDevice,
        }
        for dev_id, (tag, cls) in enumerate(cases.items(), start=1):
            device = create_device(dev_id, tag)
            self.assertIsInstance(device, cls)
            self.assertEqual(device.get_id(), dev_id)

    def test_type_is_case_insensitive(self):
        for tag in ('LIGHT', 'Light', 'lIgHt'):
            self.assertIsInstance(create_device(7, tag), LightDevice)
        self.assertIsInstance(create_device(8, 'Thermostat'), ThermostatDevice)
        self.assertIsInstance(create_device(9, 'DOOR'), DoorDevice)

    def test_thermostat_starts_at_70(self):
        thermostat = create_device(2, 'thermostat')
        self.assertEqual(thermostat.temperature, 70)
        self.assertEqual(thermostat.get_status(), "Thermostat 2 is set to 70 degrees")

    def test_each_call_builds_a_new_device(self):
        self.assertIsNot(create_device(1, 'light'), create_device(1, 'light'))

    def test_unknown_type(self):
        for tag in ('window', '', ' light', 'lights'):
            with self.assertRaises(DeviceTypeError) as ctx:
                create_device(4, tag)
            self.assertEqual(str(ctx.exception), "Unknown device type")
            self.assertEqual(ctx.exception.code, ERR_DEVTYPE)
            self.assertEqual(ctx.exception.dev_type, tag)

    def test_non_string_type(self):
        with self.assertRaises(DeviceTypeError):
            create_device(4, None)
        with self.assertRaises(DeviceTypeError):
            create_device(4, 1)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            create_device(4, 'toaster')
        self.assertEqual(error_codes[ERR_DEVTYPE], "Unknown device type")


if __name__ == '__main__':
    unittest.main()
