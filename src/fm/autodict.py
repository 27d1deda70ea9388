# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

class AutoDict(dict):
    """
    This class provides dot notation and auto creation of items.
    It's used for declarative tables like options of CLI.
    """

    def __missing__(self, key):
        val = AutoDict()
        self[key] = val
        return val

    def __getattr__(self, name):
        if name.startswith('__'):
            # don't break copy/pickle protocols
            raise AttributeError(name)
        return self[name] # this calls __missing__ if name doesn't exist

    def __setattr__(self, name, value):
        self[name] = value

    def copy(self):
        """ shallow copy """
        return AutoDict(super().copy())
