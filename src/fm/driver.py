# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Driver of a build run. Run goes through states:

   INIT -> for each selected target: RESOLVING_DEPS -> COMPILING -> SUCCESS
        -> DONE

 Any error moves the run into ABORT and no more targets are built.
"""

import os
import shutil

from fm import log, toolchains, vcs
from fm.error import FeatMakeError, FeatMakeLogicError
from fm.probe import TrialBuildProber
from fm.builder import TargetBuilder, makeBuildConfig

INIT = 'INIT'
RESOLVING_DEPS = 'RESOLVING_DEPS'
COMPILING = 'COMPILING'
SUCCESS = 'SUCCESS'
ABORT = 'ABORT'
DONE = 'DONE'

class BuildDriver(object):
    """
    Runs build procedures of selected targets in declared order
    """

    # pylint: disable = too-many-instance-attributes

    def __init__(self, confManager, targets = None, overrides = None,
                 cflags = None, ldflags = None, passThroughArgs = None,
                 workdir = None, prober = None, toolchain = None,
                 which = shutil.which):
        """
        Params 'cflags' and 'ldflags' are added after flags from buildconf.
        Params 'prober' and 'toolchain' can be used to set custom objects
        instead of detected ones.
        """

        self.conf = confManager
        self.selection = targets
        self.overrides = dict(overrides or {})
        self._cflags = cflags
        self._ldflags = ldflags
        self._passThroughArgs = list(passThroughArgs or [])
        self._workdir = workdir or confManager.startdir
        self._which = which

        self.prober = prober
        self.toolchain = toolchain
        self.states = None
        self.bconf = None
        self.selected = []
        self.built = []
        self.state = None

    def _setState(self, state, target = None):
        if target is None:
            log.debug('Build state: %s', state)
        else:
            log.debug('Build state: %s (%s)', state, target.name)
        self.state = state

    def _init(self):

        self._setState(INIT)
        conf = self.conf

        # operator overrides are applied only once here
        self.states = conf.features.makeStates(self.overrides)
        self.selected = conf.targets.select(self.selection)

        if self.toolchain is None:
            self.toolchain = toolchains.detect(which = self._which)
        log.debug('Compiler: %s (%s)', self.toolchain.name, self.toolchain.path)

        project = conf.project
        versionTag = vcs.findVersion(conf.startdir, project.get('version-match'),
                                     project.get('version-file'))
        log.info("Current %s source version %s...", project['name'], versionTag)

        cflags = conf.cflags + list(self._cflags or [])
        ldflags = conf.ldflags + list(self._ldflags or [])
        self.bconf = makeBuildConfig(cflags, ldflags, versionTag,
                                     project.get('version-define'),
                                     self._passThroughArgs, self._workdir)

        if self.prober is None:
            self.prober = TrialBuildProber(self.toolchain, self.bconf.ldflags)

    def _buildTarget(self, builder, target):

        log.pprint('NORMAL', '')
        log.printStep("Building target: %s..." % target.name)

        self._setState(RESOLVING_DEPS, target)
        resolutions = builder.resolve(target)

        self._setState(COMPILING, target)
        output = builder.compile(target, resolutions)

        self._setState(SUCCESS, target)
        relpath = os.path.relpath(output, self._workdir)
        log.pprint('GREEN', "done! You can now use ./%s" % relpath)
        return output

    def run(self):
        """
        Run build. Returns list of paths of produced files.
        Raises FeatMakeError on the first failure.
        """

        if self.state is not None:
            raise FeatMakeLogicError('BuildDriver object can be run only once')

        try:
            self._init()
            builder = TargetBuilder(self.conf.features, self.states, self.prober,
                                    self.toolchain, self.bconf)
            for target in self.selected:
                self.built.append(self._buildTarget(builder, target))
        except FeatMakeError:
            self._setState(ABORT)
            raise

        self._setState(DONE)
        return list(self.built)
