# coding=utf-8
#

"""
 Copyright (c) 2019 Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
from fm import utils

APPNAME = 'featmake'
CAP_APPNAME = 'FeatMake'
AUTHOR = 'Alexander Magola'
COPYRIGHT_ONE_LINE = '2019 - present %s' % AUTHOR

BUILDCONF_NAME = 'buildconf'
BUILDCONF_EXTS = ['.py', '.yaml', '.yml']
BUILDCONF_FILENAMES = ['%s%s' % (BUILDCONF_NAME, x) for x in BUILDCONF_EXTS]

TARGETS_WILDCARD = 'all'
UNKNOWN_VERSION = 'unknown'

DEFAULT_VERSION_FILE = 'VERSION'
DEFAULT_CFLAGS = ['-O3']

# env vars
ENV_TARGETS = 'FEATMAKE_TARGETS'
ENV_CFLAGS = 'CFLAGS'
ENV_LDFLAGS = 'LDFLAGS'
ENV_ON_TTY = 'FEATMAKE_ON_TTY'

CWD = os.getcwd()
PLATFORM = utils.platform()
