#!/usr/bin/env python
# -*- coding: utf-8 -*-
# TinyHome Module
"""
 Python module demonstrating a small smart home of lights, thermostats and doors

 Run the demonstration:
    python -m tinyhome

"""

# Modules
import sys
import argparse
import logging

from . import version, set_debug
from .demo import run_demo

log = logging.getLogger('tinyhome')

prog = 'python3 -m tinyhome' if sys.argv[0][-11:] == '__main__.py' else None
description = 'TinyHome [%s]' % (version,)
parser = argparse.ArgumentParser( prog=prog, description=description )

parser.add_argument( '-debug', '-d', help='Enable debug messages', action='store_true' )
parser.add_argument( '-nocolor', help='Disable color text in debug messages', action='store_true' )
parser.add_argument( '-version', action='version', version=description )


def main(argv=None):
    args = parser.parse_args(argv)

    if args.debug:
        set_debug(True, color=(not args.nocolor))
        log.debug('Parsed args: %r', args)

    run_demo()
    return 0


if __name__ == '__main__':
    sys.exit(main())
