# TinyHome Module
# -*- coding: utf-8 -*-

from .exceptions import *
from .const import *
from .Device import *
from .DeviceProxy import *

from .core import *
from .core import __version__
from .core import __author__
