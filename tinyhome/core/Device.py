# TinyHome Module - Device
# -*- coding: utf-8 -*-
"""
Device - Capability set shared by every TinyHome device

    turn_on()                          # Switch on (a door unlocks)
    turn_off()                         # Switch off (a door locks)
    get_status()                       # Human readable status line
    get_id()                           # Device ID given at construction
"""

from abc import ABC, abstractmethod

__all__ = ['Device']


class Device(ABC):
    """
    Abstract base for all TinyHome devices.

    Args:
        dev_id (int): The device id. Fixed for the life of the device.
    """

    def __init__(self, dev_id):
        self._id = dev_id

    @property
    def id(self):
        return self._id

    def get_id(self):
        return self._id

    @abstractmethod
    def turn_on(self):
        pass

    @abstractmethod
    def turn_off(self):
        pass

    @abstractmethod
    def get_status(self):
        """Return a one line description of the current state"""
        pass

    def state(self):
        """Return current state as a dict"""
        return {'id': self.id}

    def __repr__(self):
        return "%s(id=%r)" % (self.__class__.__name__, self.id)
