# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os

from fm import log
from fm.pyutils import struct
from fm.constants import UNKNOWN_VERSION
from fm.error import CompileError
from fm.features import REQUIRED, OPTIONAL
from fm.flags import BuildFlags
from fm.utils import runCmd

BuildConfig = struct('BuildConfig',
                     'cflags, ldflags, versionTag, versionDefine, passThroughArgs, workdir',
                     frozen = True)

def makeBuildConfig(cflags = (), ldflags = (), versionTag = None,
                    versionDefine = None, passThroughArgs = (), workdir = None):
    """
    Make read-only BuildConfig object
    """

    return BuildConfig(tuple(cflags), tuple(ldflags), versionTag or UNKNOWN_VERSION,
                       versionDefine, tuple(passThroughArgs), workdir or os.getcwd())

class TargetBuilder(object):
    """
    Build procedure of one target: resolving of its features and
    one call of the compiler.
    """

    def __init__(self, features, states, prober, toolchain, bconf, run = None):
        """
        Param 'run' can be used to set custom function to run commands.
        """

        self.features = features
        self.states = states
        self.prober = prober
        self.toolchain = toolchain
        self.bconf = bconf
        self._run = run

    def resolve(self, target):
        """
        Resolve required features of the target and then optional ones.
        Returns list of ResolutionResult objects.
        """

        resolve = self.features.resolve
        args = (self.states, self.prober)
        results = [resolve(x, REQUIRED, *args) for x in target.required]
        results.extend(resolve(x, OPTIONAL, *args) for x in target.optional)
        return results

    def makeFlags(self, target, resolutions):
        """
        Make BuildFlags object for the target
        """

        bconf = self.bconf
        flags = BuildFlags(bconf.cflags, bconf.ldflags)
        if bconf.versionDefine and bconf.versionTag != UNKNOWN_VERSION:
            flags.addDefine(bconf.versionDefine, bconf.versionTag)

        for resolution in resolutions:
            flags.merge(resolution)
        flags.addIncludes(target.includes)
        return flags

    def compile(self, target, resolutions):
        """
        Call compiler to build the target.
        Returns path of the produced file.
        """

        flags = self.makeFlags(target, resolutions)
        cmdLine = flags.commandLine(self.toolchain, target.sources, target.output,
                                    self.bconf.passThroughArgs)
        log.debug('Command line: %s', ' '.join(cmdLine))

        run = self._run or runCmd
        result = run(cmdLine, cwd = self.bconf.workdir)
        if result.exitcode != 0:
            raise CompileError(target.name, cmdLine, result.exitcode)

        return os.path.join(self.bconf.workdir, target.output)

    def build(self, target):
        """
        Resolve features and build the target.
        Returns path of the produced file.
        """

        return self.compile(target, self.resolve(target))
