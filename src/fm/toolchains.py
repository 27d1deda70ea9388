# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import shutil

from fm.error import ToolchainError
from fm.pyutils import maptype, struct
from fm.constants import PLATFORM

Toolchain = struct('Toolchain', 'name, path, args', frozen = True)

# Table with C compiler frontends in order of priority. Each item is a
# pair (name of executable, extra args for each call of the frontend).
_table = {
    'default' : (
        ('llvm-gcc', ()),
        ('gcc', ('-std=c11',)),
        ('clang', ()),
    ),
}

# private cache
_cache = {}

def reset():
    """
    Reset all cached values
    """

    _cache.clear()

def regToolchains(table):
    """
    Register table of toolchains. Keys are platform names, values are
    sequences of pairs (executable name, extra args).
    """

    if not isinstance(table, maptype) or 'default' not in table:
        raise ToolchainError("Invalid table of toolchains: %r" % (table,))

    _table.clear()
    _table.update(table)
    reset()

def getNames(platform = PLATFORM):
    """
    Return toolchain names for selected platform in order of priority
    """

    names = _cache.get(platform)
    if names:
        return names

    entries = _table.get(platform, _table['default'])
    names = _cache[platform] = tuple(name for name, _ in entries)
    return names

def detect(platform = PLATFORM, which = shutil.which):
    """
    Select the first available compiler frontend.
    Raises ToolchainError if nothing was found.
    """

    entries = _table.get(platform, _table['default'])
    for name, args in entries:
        path = which(name)
        if path:
            return Toolchain(name, path, tuple(args))

    msg = "Need a compiler. Please install one of: %s." % ', '.join(getNames(platform))
    raise ToolchainError(msg)
