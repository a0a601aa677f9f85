# TinyHome Module - DeviceProxy
# -*- coding: utf-8 -*-
"""
DeviceProxy - Access proxy in front of a TinyHome device.

Every call is forwarded to the wrapped device. turn_on() and turn_off()
announce an access check first; no check is actually made and the call
always goes through.
"""

import logging
from typing import Any

from .Device import Device

__all__ = ['DeviceProxy']

log = logging.getLogger(__name__)


class DeviceProxy(Device):
    """
    Wraps one device and delegates to it.

    Usage:
        door = DeviceProxy(create_device(3, 'door'))
        door.turn_on()      # prints the access notice, then unlocks
    """

    def __init__(self, device: Device):
        """
        Initialize the proxy.

        Args:
            device: The device to wrap. Owned by the proxy from now on.
        """
        self._device = device

    def __getattr__(self, name: str) -> Any:
        """
        Delegate attribute access to the wrapped device.

        Only called for names the proxy itself does not define, so
        device specific methods such as set_temperature() or lock()
        stay reachable through the proxy.
        """
        if name.startswith('__') or name == '_device':
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")
        try:
            return getattr(self._device, name)
        except AttributeError:
            # Report against the proxy for clearer error messages
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    @property
    def id(self):
        return self._device.id

    def get_id(self):
        return self._device.get_id()

    def turn_on(self):
        print("Proxy: Checking access before turning on the device...")
        log.debug("proxy passing turn_on to %r", self._device)
        return self._device.turn_on()

    def turn_off(self):
        print("Proxy: Checking access before turning off the device...")
        log.debug("proxy passing turn_off to %r", self._device)
        return self._device.turn_off()

    def get_status(self):
        return self._device.get_status()

    def state(self):
        return self._device.state()

    def __repr__(self) -> str:
        """String representation showing both proxy and wrapped device"""
        return f"{self.__class__.__name__}(wrapping {self._device!r})"

    @property
    def device(self):
        """
        Access to the wrapped device.

        Calls made on it directly skip the access notice.
        """
        return self._device
