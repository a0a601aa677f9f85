# TinyHome Module
# -*- coding: utf-8 -*-

from collections import namedtuple


# Schedules are records only, nothing ever runs them
class Schedule(namedtuple('Schedule', 'device_id time action')):
    __slots__ = ()

    def __str__(self):
        return "Schedule: Device %s at %s with action %s" % (self.device_id, self.time, self.action)
