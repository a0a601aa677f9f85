# TinyHome Thermostat Device
# -*- coding: utf-8 -*-
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Classes
    ThermostatDevice(dev_id, temperature=70)
        dev_id (int): Device ID e.g. 2
        temperature (int, optional): Starting set point in degrees

 Functions
    ThermostatDevice:
        set_temperature(temperature)   # Change the set point, no range check
        turn_on()                      # Announce only, set point is unchanged
        turn_off()                     # Announce only, set point is unchanged
        get_status()                   # "Thermostat 2 is set to 70 degrees"
"""

import logging

from .core import Device, DEFAULT_TEMPERATURE

log = logging.getLogger(__name__)


class ThermostatDevice(Device):
    """
    Represents a Smart Thermostat.

    Args:
        dev_id (int): The device id.
        temperature (int, optional): Set point in degrees. Defaults to DEFAULT_TEMPERATURE.
    """

    def __init__(self, dev_id, temperature=DEFAULT_TEMPERATURE):
        super(ThermostatDevice, self).__init__(dev_id)
        self._temperature = temperature

    @property
    def temperature(self):
        return self._temperature

    def set_temperature(self, temperature):
        """Set the thermostat to `temperature` degrees, stored as given"""
        self._temperature = temperature
        log.debug("thermostat %r set point now %r", self.id, temperature)
        print("Thermostat %s set to %s degrees." % (self.id, temperature))

    def turn_on(self):
        log.debug("thermostat %r on", self.id)
        print("Thermostat %s is turned on." % self.id)

    def turn_off(self):
        log.debug("thermostat %r off", self.id)
        print("Thermostat %s is turned off." % self.id)

    def get_status(self):
        return "Thermostat %s is set to %s degrees" % (self.id, self._temperature)

    def state(self):
        return {'id': self.id, 'temperature': self._temperature}
