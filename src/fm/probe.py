# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Checks of libraries on the host by trial builds.
"""

import os
import tempfile
import shutil

from fm import log
from fm.utils import runCmd

TRIAL_CODE = 'int main() { return 0; }\n'

class LibProber(object):
    """
    Interface to check that a library can be linked on the host
    """

    def haslib(self, lib):
        """
        Return True if library 'lib' is linkable
        """
        raise NotImplementedError

class TrialBuildProber(LibProber):
    """
    Checks a library by compiling and linking a trivial program with it.
    All output of the trial build is suppressed.
    """

    def __init__(self, toolchain, ldflags = None):
        self.toolchain = toolchain
        self.ldflags = list(ldflags or [])

    def _cmdLine(self, lib, outpath):
        cmdLine = [self.toolchain.path]
        cmdLine.extend(self.toolchain.args)
        # source from stdin must be before libs
        cmdLine.extend(['-x', 'c', '-', '-x', 'none'])
        cmdLine.extend(self.ldflags)
        cmdLine.extend(['-l%s' % lib, '-o', outpath])
        return cmdLine

    def haslib(self, lib):

        tmpdir = tempfile.mkdtemp(prefix = 'fm.probe.')
        try:
            cmdLine = self._cmdLine(lib, os.path.join(tmpdir, 'probe'))
            log.debug('Probe of lib%s: %s', lib, ' '.join(cmdLine))
            result = runCmd(cmdLine, cwd = tmpdir, discardOutput = True,
                            stdinData = TRIAL_CODE)
        finally:
            shutil.rmtree(tmpdir, ignore_errors = True)

        return result.exitcode == 0
