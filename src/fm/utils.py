# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import re
import shlex
import subprocess
from importlib import import_module as importModule
from importlib.util import spec_from_file_location, module_from_spec

from fm.pyutils import stringtype, struct
from fm.error import FeatMakeError

_RE_TOLIST = re.compile(r"""((?:[^\s"']|"[^"]*"|'[^']*')+)""", re.ASCII)

def platform():
    """
    Return current system platform. It is always 'windows' for MS Windows.
    """

    result = sys.platform
    if result == 'win32':
        return 'windows' # pragma: no cover

    # 'linux2', 'freebsd13', etc.
    return re.split(r'\d+$', result)[0]

PLATFORM = platform()

def stripQuotes(val):
    """
    Strip quotes ' or " from the begin and the end of a string but do it only
    if they are the same on both sides.
    """

    if not val:
        return val

    if len(val) < 2:
        return val

    first = val[0]
    last = val[-1]
    if first == last and first in ("'", '"'):
        return val[1:-1]

    return val

def toList(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    It supports preserving quoted substrings with spaces.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val

    if not ('"' in val or "'" in val): # optimization
        return val.split()

    return [stripQuotes(x) for x in _RE_TOLIST.split(val)[1::2]]

def uniqueListWithOrder(lst):
    """
    Return new list with preserved the original order of the list.
    Each element in lst must be hashable.
    """

    # pylint: disable = simplifiable-condition

    used = set()
    return [x for x in lst if x not in used and (used.add(x) or True)]

def envValToBool(rawVal):
    """
    Return env val as native bool value.
    Returns False if not recognized.
    """

    result = False
    if rawVal:
        try:
            # value from os.environ is a string but it may be a digit
            result = bool(int(rawVal))
        except ValueError:
            result = rawVal in ('true', 'True', 'yes', 'on')

    return result

def loadPyModule(name, filepath = None):
    """
    Load python module by name. If filepath is set then the module is
    loaded from this file without putting it into sys.modules.
    """

    if filepath is None:
        return importModule(name)

    spec = spec_from_file_location(name, filepath)
    if spec is None:
        raise ImportError("Can't load module %r from %r" % (name, filepath))
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

ProcCmdResult = struct('ProcCmdResult', 'exitcode, stdout, stderr')

class ProcCmd(object):
    """
    Class to run external command in a subprocess.
    It waits for the process to exit, there is no timeout.
    """

    def __init__(self, cmdLine, captureOutput = False, discardOutput = False,
                 stdinData = None):

        """
        If discardOutput is True then stdout and stderr of the process go
        to os.devnull. If captureOutput is True then they are returned in the
        result. Parameter stdinData is a string written into stdin.
        """

        if isinstance(cmdLine, stringtype):
            cmdLine = shlex.split(cmdLine)

        self._cmdLine = cmdLine
        self._stdinData = stdinData
        self._popenArgs = {
            'stdout' : None,
            'stderr' : None,
            'universal_newlines' : True,
        }

        if stdinData is not None:
            self._popenArgs['stdin'] = subprocess.PIPE
        else:
            self._popenArgs['stdin'] = subprocess.DEVNULL

        if captureOutput:
            self._popenArgs['stdout'] = subprocess.PIPE
            self._popenArgs['stderr'] = subprocess.PIPE
        elif discardOutput:
            self._popenArgs['stdout'] = subprocess.DEVNULL
            self._popenArgs['stderr'] = subprocess.DEVNULL

    @property
    def cmdLine(self):
        """ Get command line as a list """
        return self._cmdLine

    def run(self, cwd = None, env = None):
        """
        Run command.
        Returns ProcCmdResult.
        """

        kwargs = dict(self._popenArgs)
        kwargs.update({
            'cwd' : cwd,
            'env' : env,
        })

        try:
            proc = subprocess.Popen(self._cmdLine, **kwargs)
            stdout, stderr = proc.communicate(self._stdinData)
        except (OSError, subprocess.SubprocessError) as ex:
            raise FeatMakeError(str(ex), ex) from ex

        return ProcCmdResult(proc.returncode, stdout, stderr)

def runCmd(cmdLine, cwd = None, env = None, captureOutput = False,
           discardOutput = False, stdinData = None):
    """
    Run external command in a subprocess and wait for it.
    Returns ProcCmdResult.
    """

    procCmd = ProcCmd(cmdLine, captureOutput, discardOutput, stdinData)
    return procCmd.run(cwd, env)
