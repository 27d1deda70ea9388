# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest

import tests.common as cmn
from fm.error import CompileError, DependencyError
from fm.features import makeFeature, FeatureRegistry
from fm.targets import makeTarget
from fm.builder import TargetBuilder, makeBuildConfig

FEATURES = FeatureRegistry([
    makeFeature('with_math', 'm'),
    makeFeature('with_zlib', 'z', enabledByDefault = False),
    makeFeature('with_color', 'curses', auxLibs = ['tinfo'], define = 'COLOR'),
])

def makeBuilder(tmpdir, run, libs = ('m', 'z', 'curses'), overrides = None, **kwargs):
    kwargs.setdefault('cflags', ['-O3'])
    kwargs.setdefault('workdir', str(tmpdir))
    bconf = makeBuildConfig(**kwargs)
    states = FEATURES.makeStates(overrides)
    return TargetBuilder(FEATURES, states, cmn.StubProber(libs), cmn.GCC, bconf, run)

def testBuildConfig():

    bconf = makeBuildConfig()
    assert bconf.cflags == ()
    assert bconf.versionTag == 'unknown'
    assert bconf.workdir == os.getcwd()

    with pytest.raises(AttributeError):
        bconf.cflags = ('-O2', )

def testResolveOrder(tmpdir):

    builder = makeBuilder(tmpdir, cmn.FakeRun())
    target = makeTarget('hello', 'main.c', required = 'with_color',
                        optional = 'with_zlib with_math')
    results = builder.resolve(target)
    assert [x.feature for x in results] == ['with_color', 'with_zlib', 'with_math']
    assert [x.enabled for x in results] == [True, False, True]
    assert builder.prober.calls == ['curses', 'tinfo', 'm']

def testBuild(tmpdir):

    run = cmn.FakeRun()
    builder = makeBuilder(tmpdir, run, overrides = {'with_zlib' : True},
                          versionTag = '1.0.0', versionDefine = 'HELLO_VERSION',
                          ldflags = ['-s'], passThroughArgs = ['-g'])
    target = makeTarget('hello', 'main.c', optional = 'with_math with_zlib',
                        includes = 'inc', output = 'hello-bin')

    output = builder.build(target)
    assert output == os.path.join(str(tmpdir), 'hello-bin')
    assert run.calls == [([
        '/usr/bin/gcc', '-std=c11', '-O3', '-DHELLO_VERSION=1.0.0',
        '-DWITH_MATH=1', '-DWITH_ZLIB=1', '-Iinc', '-g', 'main.c',
        '-s', '-lm', '-lz', '-o', 'hello-bin',
    ], str(tmpdir))]

def testBuildWithoutVersion(tmpdir):

    run = cmn.FakeRun()
    builder = makeBuilder(tmpdir, run, versionDefine = 'HELLO_VERSION')
    target = makeTarget('hello', 'main.c', optional = 'with_zlib')
    builder.build(target)

    cmdLine = run.calls[0][0]
    assert not [x for x in cmdLine if x.startswith('-D')]
    assert not [x for x in cmdLine if x.startswith('-l')]

def testBuildFailed(tmpdir):

    run = cmn.FakeRun(exitcode = 2)
    builder = makeBuilder(tmpdir, run)
    target = makeTarget('hello', 'main.c')
    with pytest.raises(CompileError) as cm:
        builder.build(target)
    assert cm.value.target == 'hello'
    assert cm.value.exitcode == 2
    assert cm.value.cmd == run.calls[0][0]

def testBuildMissingRequired(tmpdir):

    run = cmn.FakeRun()
    builder = makeBuilder(tmpdir, run, libs = ())
    target = makeTarget('hello', 'main.c', required = 'with_math')
    with pytest.raises(DependencyError):
        builder.build(target)
    # compiler is not called
    assert not run.calls

def testDefaultRun(tmpdir, mocker):

    run = cmn.FakeRun()
    mocker.patch('fm.builder.runCmd', run)
    builder = makeBuilder(tmpdir, None)
    builder.build(makeTarget('hello', 'main.c'))
    assert run.outputs == ['hello']
