# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Diagnostics (debug/info/warnings/errors) go to stderr through the 'logging'
 package. Progress of a build goes to stdout with 'pprint'/'printStep'.
"""

import os
import sys
import logging

from fm.constants import APPNAME, PLATFORM, ENV_ON_TTY
from fm.utils import envValToBool

colorSettings = {
    'USE'    : 1,
    'BOLD'   : '\x1b[01;1m',
    'RED'    : '\x1b[01;31m',
    'GREEN'  : '\x1b[32m',
    'YELLOW' : '\x1b[33m',
    'PINK'   : '\x1b[35m',
    'BLUE'   : '\x1b[01;34m',
    'CYAN'   : '\x1b[36m',
    'GREY'   : '\x1b[37m',
    'NORMAL' : '\x1b[0m',
}

class _Colors(object):

    def __call__(self, name):
        if not colorSettings['USE']:
            return ''
        return colorSettings.get(name, '')

    def __getattr__(self, name):
        return self(name)

colors = _Colors()

_LEVEL_PREFIXES = {
    logging.DEBUG   : ('DEBUG:    ', 'GREY'),
    logging.INFO    : ('INFO:     ', 'NORMAL'),
    logging.WARNING : ('WARNING:  ', 'YELLOW'),
    logging.ERROR   : ('ERROR:    ', 'RED'),
}

class _StdErrHandler(logging.StreamHandler):
    """
    Stream handler that always writes to the current sys.stderr
    """

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, _):
        pass

class _Formatter(logging.Formatter):

    def format(self, record):
        prefix, color = _LEVEL_PREFIXES.get(record.levelno,
                                            _LEVEL_PREFIXES[logging.ERROR])
        color = getattr(record, 'c1', colors(color))
        msg = record.getMessage()
        return '%s%s%s%s' % (color, prefix, msg, colors.NORMAL)

def _makeLogger():
    logger = logging.getLogger(APPNAME)
    if not logger.handlers:
        handler = _StdErrHandler()
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.INFO)
    return logger

_logger = _makeLogger()

_verbose = 0

debug = _logger.debug
error = _logger.error
warn  = _logger.warning
info  = _logger.info

def pprint(color, msg, stream = None, end = '\n'):
    """
    Print a progress message with selected color
    """

    if stream is None:
        stream = sys.stdout
    stream.write('%s%s%s%s' % (colors(color), msg, colors.NORMAL, end))
    stream.flush()

def enableColorsByCli(colorArg):
    """
    Set up log colors by arg from CLI
    """

    setting = {'yes' : 2, 'auto' : 1, 'no' : 0}[colorArg]
    if setting == 1:
        onTTY = os.environ.get(ENV_ON_TTY)
        if onTTY:
            onTTY = envValToBool(onTTY)
        else:
            onTTY = sys.stderr.isatty() or sys.stdout.isatty()
        if not onTTY:
            setting = 0

    if setting == 1:
        defaultTerm = 'dumb'
        if PLATFORM == 'windows':
            defaultTerm = ''
        if os.environ.get('TERM', defaultTerm) in ('dumb', 'emacs'):
            setting = 0

    colorSettings['USE'] = setting

def colorsEnabled():
    """ Return True if color output is enabled """
    return bool(colorSettings['USE'])

def verbose():
    """ Get current verbose level """
    return _verbose

def setVerbose(value):
    """ Set verbose level. Debug messages are shown with level > 0 """

    global _verbose # pylint: disable = global-statement
    _verbose = value
    _logger.setLevel(logging.DEBUG if value > 0 else logging.INFO)

def printStep(msg):
    """
    Print some step of a build
    """
    pprint('CYAN', msg)
