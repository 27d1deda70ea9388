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
from fm.constants import APPNAME
from fm import starter, error

joinpath = os.path.join

HELLO_DIR = joinpath(os.path.dirname(cmn.TESTS_DIR), 'demos', 'hello')

@pytest.fixture(autouse = True)
def cleanEnv(monkeypatch):
    for name in ('CFLAGS', 'LDFLAGS', 'FEATMAKE_TARGETS', 'with_math', 'with_zlib'):
        monkeypatch.delenv(name, raising = False)

@pytest.fixture
def hello(mocker):
    """ Build of demos/hello without real compiler """

    run = cmn.FakeRun()
    mocker.patch('fm.builder.runCmd', run)
    mocker.patch('fm.vcs.gitDescribe', return_value = None)
    mocker.patch('fm.toolchains.detect', return_value = cmn.GCC)
    mocker.patch('fm.driver.TrialBuildProber', lambda *args: cmn.StubProber(['m', 'z']))
    mocker.patch('fm.starter.CWD', HELLO_DIR)
    return run

def testEnvFeatureOverrides():

    environ = { 'with_math' : '0', 'with_zlib' : 'yes', 'other' : '1', 'with_qt' : ' ' }
    overrides = starter.envFeatureOverrides(['with_math', 'with_zlib', 'with_qt'], environ)
    assert overrides == { 'with_math' : False, 'with_zlib' : True }

def testRunVersion(capsys):

    assert starter.run([APPNAME, 'version']) == 0
    assert 'FeatMake version' in capsys.readouterr().out

def testRunBuild(hello, capsys):

    exitcode = starter.run([APPNAME, 'build', '--color', 'no', '--', '-g'])
    assert exitcode == 0
    assert hello.outputs == ['hello']

    out, err = capsys.readouterr()
    assert 'done! You can now use ./hello' in out
    assert 'Current hello source version 1.0.0...' in err

    cmdLine = hello.calls[0][0]
    assert '-DHELLO_VERSION=1.0.0' in cmdLine
    assert '-DHELLO_MATH=1' in cmdLine
    assert '-lz' not in cmdLine
    assert '-g' in cmdLine
    assert hello.calls[0][1] == HELLO_DIR

def testRunBuildOverrides(hello, monkeypatch):

    monkeypatch.setenv('with_zlib', '1')
    monkeypatch.setenv('with_math', '1')

    exitcode = starter.run([APPNAME, 'all', '-d', 'with_math'])
    assert exitcode == 1
    # 'hello' is built without math, 'hello-math' needs it
    assert hello.outputs == ['hello']
    cmdLine = hello.calls[0][0]
    assert '-DHELLO_ZLIB=1' in cmdLine
    assert '-DHELLO_MATH=1' not in cmdLine

def testRunErrors(hello, capsys):

    assert starter.run([APPNAME, 'hello-gui']) == 1
    assert 'hello-gui' in capsys.readouterr().err

    assert starter.run([APPNAME, '--buildconf', 'other.py']) == 1
    assert 'not found' in capsys.readouterr().err

    hello.failOn = 'hello'
    assert starter.run([APPNAME, 'hello', '-vv']) == 1
    assert "Building of the target 'hello' failed" in capsys.readouterr().err
    assert error.verbose == 2

def testRunInterrupted(mocker, capsys):

    mocker.patch('fm.starter.runBuild', side_effect = KeyboardInterrupt)
    assert starter.run([APPNAME]) == 68
    assert 'Interrupted' in capsys.readouterr().err
