# coding=utf-8
#

"""
 Copyright (c) 2021, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

__all__ = [
    'load',
]

import os
import io
import types

import yaml as pyyaml

from fm.error import FeatMakeConfError
from fm.pyutils import maptype, stringtype

# C version of the loader is faster but it's not always available
YamlLoader = getattr(pyyaml, 'CSafeLoader', pyyaml.SafeLoader)

class StringIO(io.StringIO):
    """
    Customized StringIO
    """

    def __init__(self, data, name = '<file>'):
        super().__init__(data)
        # it's used in pyyaml for error reports
        self.name = name

def load(filepath):
    """
    Load YAML buildconf
    """

    buildconf = types.ModuleType('buildconf')
    buildconf.__file__ = os.path.abspath(filepath)
    data = {}

    # buildconf file should not be very big so it's loaded completely in memory
    with io.open(filepath, 'rt', encoding = 'utf-8') as fstream:
        stream = StringIO(fstream.read(), fstream.name)

    try:
        loader = YamlLoader(stream)
        try:
            data = loader.get_single_data()
        finally:
            loader.dispose()
    except pyyaml.YAMLError as ex:
        raise FeatMakeConfError(ex = ex, confpath = filepath) from ex

    if data is None:
        raise FeatMakeConfError("File %r has no config data" % filepath)

    if not isinstance(data, maptype):
        raise FeatMakeConfError("File %r has invalid structure" % filepath)

    for k, v in data.items():
        if not isinstance(k, stringtype):
            msg = "File %r:\n" % filepath
            msg += "  The variable %r is not string" % k
            raise FeatMakeConfError(msg)
        setattr(buildconf, k, v)

    return buildconf
