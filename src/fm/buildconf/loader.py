# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

__all__ = [
    'findConfFile',
    'applyDefaults',
    'load',
]

import os
import types
import inspect

from fm.constants import BUILDCONF_FILENAMES, DEFAULT_CFLAGS, DEFAULT_VERSION_FILE
from fm.error import FeatMakeConfError
from fm.utils import loadPyModule
from fm.buildconf.validator import Validator

isfile = os.path.isfile
joinpath = os.path.join

def findConfFile(dpath, fname = None):
    """
    Try to find buildconf file.
    Returns filename if found or None
    """
    if fname:
        if isfile(joinpath(dpath, fname)):
            return fname
        return None

    for name in BUILDCONF_FILENAMES:
        if isfile(joinpath(dpath, name)):
            return name
    return None

def _isConfValue(value):
    return not (inspect.ismodule(value) or inspect.isroutine(value) \
                or inspect.isclass(value))

def _loadPy(filepath):

    try:
        module = loadPyModule('buildconf', filepath)
    except Exception as ex: # pylint: disable = broad-except
        raise FeatMakeConfError(str(ex), ex, confpath = filepath) from ex

    buildconf = types.ModuleType('buildconf')
    buildconf.__file__ = os.path.abspath(filepath)
    for k, v in vars(module).items():
        if k.startswith('_') or not _isConfValue(v):
            continue
        # python names can't have '-'
        setattr(buildconf, k.replace('_', '-'), v)
    return buildconf

def applyDefaults(buildconf, projectDir):
    """
    Set default values to some params in buildconf if they don't exist
    """

    params = getattr(buildconf, 'project', None)
    if params is None:
        params = {}
        setattr(buildconf, 'project', params)
    params.setdefault('name', os.path.basename(os.path.abspath(projectDir)))
    params.setdefault('version-file', DEFAULT_VERSION_FILE)

    if not hasattr(buildconf, 'cflags'):
        setattr(buildconf, 'cflags', list(DEFAULT_CFLAGS))
    if not hasattr(buildconf, 'ldflags'):
        setattr(buildconf, 'ldflags', [])

    for param in ('features', 'targets'):
        if not hasattr(buildconf, param):
            setattr(buildconf, param, {})

    if not hasattr(buildconf, 'default-targets'):
        # the first declared target
        targets = list(getattr(buildconf, 'targets'))
        setattr(buildconf, 'default-targets', targets[:1])

def load(dirpath, filename = None):
    """
    Load and validate buildconf from directory 'dirpath'.
    Param 'filename' can be used to set a name of file.
    """

    found = findConfFile(dirpath, filename)
    if not found:
        names = filename if filename else '/'.join(BUILDCONF_FILENAMES)
        msg = "Config %s not found in %r." % (names, dirpath)
        raise FeatMakeConfError(msg)

    filepath = joinpath(dirpath, found)
    if found.endswith('.py'):
        buildconf = _loadPy(filepath)
    else:
        from fm.buildconf import yaml
        buildconf = yaml.load(filepath)

    Validator(buildconf).run()
    applyDefaults(buildconf, dirpath)
    return buildconf
