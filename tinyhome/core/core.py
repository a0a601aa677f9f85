# TinyHome Module
# -*- coding: utf-8 -*-
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Core Helper Functions

 Module Functions
    set_debug(toggle, color)           # Activate verbose debugging output

"""

# Modules
import logging
import sys

try:
    from colorama import init
    HAVE_COLORAMA = True
except ImportError:
    HAVE_COLORAMA = False

HAVE_COLOR = HAVE_COLORAMA or not sys.platform.startswith('win')

# Colorama terminal color capability for all platforms
if HAVE_COLORAMA:
    init()

version_tuple = (1, 0, 0)  # Major, Minor, Patch
version = __version__ = "%d.%d.%d" % version_tuple
__author__ = "tinyhome"

log = logging.getLogger('tinyhome')


def set_debug(toggle=True, color=True):
    """Enable tinyhome verbose logging"""
    color = color and HAVE_COLOR
    if toggle:
        if color:
            logging.basicConfig(
                format="\x1b[31;1m%(levelname)s:%(message)s\x1b[0m", level=logging.DEBUG
            )
        else:
            logging.basicConfig(format="%(levelname)s:%(message)s", level=logging.DEBUG)
        log.setLevel(logging.DEBUG)
        log.debug("TinyHome [%s]\n", __version__)
        log.debug("Python %s on %s", sys.version, sys.platform)
    else:
        log.setLevel(logging.NOTSET)

