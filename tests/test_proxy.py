#!/usr/bin/env python3
"""
Tests for DeviceProxy delegation
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import MagicMock

from tinyhome import DeviceProxy, Device, create_device

NOTICE_ON = "Proxy: Checking access before turning on the device..."
NOTICE_OFF = "Proxy: Checking access before turning off the device..."


def capture(func, *args):
    buf = io.StringIO()
    with redirect_stdout(buf):
        func(*args)
    return buf.getvalue().splitlines()


class TestDeviceProxy(unittest.TestCase):

    def test_notice_then_delegate(self):
        proxy = DeviceProxy(create_device(1, 'light'))
        self.assertEqual(capture(proxy.turn_on), [NOTICE_ON, "Light 1 is turned on."])
        self.assertEqual(capture(proxy.turn_off), [NOTICE_OFF, "Light 1 is turned off."])

    def test_delegation_with_mock(self):
        device = MagicMock(spec=Device)
        device.get_status.return_value = "Mock 5 is fine"
        device.get_id.return_value = 5
        proxy = DeviceProxy(device)

        with redirect_stdout(io.StringIO()):
            proxy.turn_on()
            proxy.turn_off()
        device.turn_on.assert_called_once_with()
        device.turn_off.assert_called_once_with()

        self.assertEqual(proxy.get_status(), "Mock 5 is fine")
        self.assertEqual(proxy.get_id(), 5)

    def test_behaves_like_the_device(self):
        for tag in ('light', 'thermostat', 'door'):
            plain = create_device(3, tag)
            proxy = DeviceProxy(create_device(3, tag))
            self.assertEqual(proxy.get_status(), plain.get_status())
            self.assertEqual(proxy.get_id(), plain.get_id())
            self.assertEqual(proxy.id, plain.id)

            with redirect_stdout(io.StringIO()):
                plain.turn_on()
                proxy.turn_on()
            self.assertEqual(proxy.get_status(), plain.get_status())
            self.assertEqual(proxy.state(), plain.state())

            with redirect_stdout(io.StringIO()):
                plain.turn_off()
                proxy.turn_off()
            self.assertEqual(proxy.get_status(), plain.get_status())

    def test_device_specific_methods_pass_through(self):
        thermostat = create_device(2, 'thermostat')
        proxy = DeviceProxy(thermostat)
        self.assertEqual(capture(proxy.set_temperature, 72), ["Thermostat 2 set to 72 degrees."])
        self.assertEqual(thermostat.temperature, 72)
        self.assertEqual(proxy.temperature, 72)

        door = DeviceProxy(create_device(3, 'door'))
        self.assertEqual(capture(door.unlock), ["Door 3 is unlocked."])
        self.assertFalse(door.is_locked)

    def test_unknown_attribute(self):
        proxy = DeviceProxy(create_device(1, 'light'))
        with self.assertRaises(AttributeError) as ctx:
            proxy.set_temperature(72)
        self.assertIn("DeviceProxy", str(ctx.exception))

    def test_wrapped_device_access(self):
        light = create_device(1, 'light')
        proxy = DeviceProxy(light)
        self.assertIs(proxy.device, light)
        self.assertIsInstance(proxy, Device)
        self.assertEqual(repr(proxy), "DeviceProxy(wrapping LightDevice(id=1))")

    def test_proxy_of_proxy(self):
        proxy = DeviceProxy(DeviceProxy(create_device(3, 'door')))
        self.assertEqual(capture(proxy.turn_on), [NOTICE_ON, NOTICE_ON, "Door 3 is unlocked."])
        self.assertEqual(proxy.get_status(), "Door 3 is Unlocked")


if __name__ == '__main__':
    unittest.main()
