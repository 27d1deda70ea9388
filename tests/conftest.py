# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import copy
import pytest

import tests.common as cmn
from fm import log, error

@pytest.fixture(autouse = True)
def resetLogs():
    log.enableColorsByCli('no')
    log.setVerbose(0)
    error.verbose = 0
    yield
    log.setVerbose(0)
    error.verbose = 0

@pytest.fixture
def prober():
    return cmn.StubProber(['sodium', 'json-c', 'curses', 'tinfo', 'xml2'])

@pytest.fixture
def fakeRun():
    return cmn.FakeRun()

@pytest.fixture
def mpwConf(tmpdir):
    startdir = str(tmpdir.realpath())
    return cmn.makeConfManager(startdir, copy.deepcopy(cmn.MPW_CONF))
