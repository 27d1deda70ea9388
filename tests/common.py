# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import types

from fm.utils import ProcCmdResult
from fm.probe import LibProber
from fm.toolchains import Toolchain
from fm.buildconf import loader as bconfloader
from fm.buildconf.validator import Validator
from fm.buildconf.processing import ConfManager

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

class StubProber(LibProber):
    """ Prober with canned answers """

    def __init__(self, libs = ()):
        self.libs = set(libs)
        self.calls = []

    def haslib(self, lib):
        self.calls.append(lib)
        return lib in self.libs

class FakeRun(object):
    """ Replacement for fm.utils.runCmd """

    def __init__(self, exitcode = 0, failOn = None):
        self.exitcode = exitcode
        self.failOn = failOn
        self.calls = []

    def __call__(self, cmdLine, cwd = None, **kwargs):
        self.calls.append((list(cmdLine), cwd))
        exitcode = self.exitcode
        if self.failOn and self.failOn == cmdLine[cmdLine.index('-o') + 1]:
            exitcode = 1
        return ProcCmdResult(exitcode, None, None)

    @property
    def outputs(self):
        return [x[0][x[0].index('-o') + 1] for x in self.calls]

GCC = Toolchain('gcc', '/usr/bin/gcc', ('-std=c11',))

def asBuildConf(params, filepath = None):
    buildconf = types.ModuleType('buildconf')
    buildconf.__file__ = os.path.abspath(filepath or 'buildconf.py')
    for k, v in params.items():
        setattr(buildconf, k, v)
    return buildconf

def makeConfManager(startdir, params):
    buildconf = asBuildConf(params, os.path.join(startdir, 'buildconf.py'))
    Validator(buildconf).run()
    bconfloader.applyDefaults(buildconf, startdir)
    return ConfManager(startdir, buildconf = buildconf)

# features and targets like in the bundled mpw demo
MPW_CONF = {
    'features' : {
        'mpw_sodium' : { 'lib' : 'sodium', 'define' : 'MPW_SODIUM' },
        'mpw_json' : { 'lib' : 'json-c', 'define' : 'MPW_JSON' },
        'mpw_color' : {
            'lib' : 'curses', 'aux-libs' : 'tinfo', 'define' : 'MPW_COLOR'
        },
        'mpw_xml' : {
            'lib' : 'xml2', 'define' : 'MPW_XML',
            'includes' : ['/usr/include/libxml2'],
        },
    },
    'targets' : {
        'mpw' : {
            'source' : 'core/mpw-util.c cli/mpw-cli.c',
            'requires' : 'mpw_sodium',
            'optional' : 'mpw_color mpw_json',
            'includes' : 'core cli',
        },
        'mpw-bench' : {
            'source' : 'core/mpw-util.c cli/mpw-bench.c',
            'requires' : 'mpw_sodium',
        },
        'mpw-tests' : {
            'source' : 'core/mpw-util.c cli/mpw-tests.c',
            'requires' : 'mpw_sodium mpw_xml',
        },
    },
    'default-targets' : 'mpw',
}
