# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Best-effort lookup of the version of a project being built.
"""

import io
import os

from fm import log
from fm.constants import UNKNOWN_VERSION, DEFAULT_VERSION_FILE
from fm.error import FeatMakeError
from fm.utils import runCmd

def gitDescribe(startdir, match = None):
    """
    Get descriptive tag from 'git describe'.
    Returns None if it's not possible.
    """

    cmdLine = ['git', 'describe']
    if match:
        cmdLine.extend(['--match', match])
    cmdLine.extend(['--long', '--dirty'])

    try:
        result = runCmd(cmdLine, cwd = startdir, captureOutput = True)
    except FeatMakeError as ex:
        log.debug("Can't run git: %s", ex)
        return None

    if result.exitcode != 0:
        return None
    return result.stdout.strip() or None

def readVersionFile(filepath):
    """
    Get version from the first meaningful line of a file.
    Returns None if it's not possible.
    """

    if not os.path.isfile(filepath):
        return None

    try:
        with io.open(filepath, 'rt', encoding = 'utf-8') as file:
            lines = file.readlines()
    except (OSError, UnicodeDecodeError) as ex:
        log.debug("Can't read %r: %s", filepath, ex)
        return None

    for line in lines:
        line = line.strip()
        if line and not line.startswith('#'):
            return line
    return None

def findVersion(startdir, match = None, versionFile = DEFAULT_VERSION_FILE):
    """
    Find version tag of the project in 'startdir': from git first, then
    from the version file. Returns 'unknown' if nothing is found.
    """

    version = gitDescribe(startdir, match)
    if version is None and versionFile:
        if not os.path.isabs(versionFile):
            versionFile = os.path.join(startdir, versionFile)
        version = readVersionFile(versionFile)

    return version or UNKNOWN_VERSION
