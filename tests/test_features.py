# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest

import tests.common as cmn
from fm.error import FeatMakeConfError, ConfigurationError, DependencyError
from fm.features import REQUIRED, OPTIONAL, makeFeature, FeatureRegistry

def makeRegistry():
    return FeatureRegistry([
        makeFeature('mpw_sodium', 'sodium', define = 'MPW_SODIUM'),
        makeFeature('mpw_color', 'curses', auxLibs = ['tinfo'], define = 'MPW_COLOR'),
        makeFeature('mpw_xml', 'xml2', includes = ['/usr/include/libxml2']),
        makeFeature('mpw_json', 'json-c', enabledByDefault = False),
    ])

def testMakeFeature():

    feature = makeFeature('with_zlib', 'z')
    assert feature.name == 'with_zlib'
    assert feature.lib == 'z'
    assert feature.define == 'WITH_ZLIB'
    assert feature.auxLibs == ()
    assert feature.includes == ()
    assert feature.enabledByDefault is True

    with pytest.raises(AttributeError):
        feature.lib = 'zz'

    with pytest.raises(FeatMakeConfError):
        makeFeature('broken', '')

def testRegistry():

    registry = makeRegistry()
    assert registry.names() == ['mpw_sodium', 'mpw_color', 'mpw_xml', 'mpw_json']
    assert len(registry) == 4
    assert 'mpw_xml' in registry
    assert 'mpw_qt' not in registry
    assert registry.get('mpw_color').auxLibs == ('tinfo', )

    with pytest.raises(FeatMakeConfError):
        registry.get('mpw_qt')
    with pytest.raises(FeatMakeConfError):
        registry.add(makeFeature('mpw_xml', 'xml2'))

def testStates():

    registry = makeRegistry()
    states = registry.makeStates()
    assert dict(states) == {
        'mpw_sodium' : True, 'mpw_color' : True,
        'mpw_xml' : True, 'mpw_json' : False,
    }

    states = registry.makeStates({'mpw_json' : True, 'mpw_color' : 0})
    assert states['mpw_json'] is True
    assert states['mpw_color'] is False
    assert len(states) == 4

    with pytest.raises(TypeError):
        states['mpw_xml'] = False # pylint: disable = unsupported-assignment-operation

    with pytest.raises(FeatMakeConfError):
        registry.makeStates({'mpw_qt' : True})

def testResolveEnabled():

    registry = makeRegistry()
    states = registry.makeStates()
    prober = cmn.StubProber(['sodium', 'curses', 'tinfo', 'xml2'])

    result = registry.resolve('mpw_sodium', REQUIRED, states, prober)
    assert result.enabled
    assert result.compileDefines == (('MPW_SODIUM', 1), )
    assert result.libs == ('sodium', )
    assert result.includes == ()

    result = registry.resolve('mpw_xml', OPTIONAL, states, prober)
    assert result.enabled
    assert result.compileDefines == (('MPW_XML', 1), )
    assert result.includes == ('/usr/include/libxml2', )

def testResolveAuxLibs():

    registry = makeRegistry()
    states = registry.makeStates()

    prober = cmn.StubProber(['curses', 'tinfo'])
    result = registry.resolve('mpw_color', OPTIONAL, states, prober)
    assert result.libs == ('curses', 'tinfo')
    assert prober.calls == ['curses', 'tinfo']

    # missing aux lib is skipped silently
    prober = cmn.StubProber(['curses'])
    result = registry.resolve('mpw_color', REQUIRED, states, prober)
    assert result.enabled
    assert result.libs == ('curses', )

    # aux libs are not probed if the primary lib is missing
    prober = cmn.StubProber(['tinfo'])
    result = registry.resolve('mpw_color', OPTIONAL, states, prober)
    assert not result.enabled
    assert prober.calls == ['curses']

def testResolveDisabled(capsys):

    registry = makeRegistry()
    states = registry.makeStates({'mpw_sodium' : False})
    prober = cmn.StubProber(['sodium'])

    result = registry.resolve('mpw_sodium', OPTIONAL, states, prober)
    assert not result.enabled
    assert result.compileDefines == ()
    assert result.libs == ()
    # disabled feature is never probed
    assert prober.calls == []
    assert 'mpw_sodium is supported but not enabled.' in capsys.readouterr().err

    with pytest.raises(ConfigurationError) as cm:
        registry.resolve('mpw_sodium', REQUIRED, states, prober)
    assert cm.value.feature == 'mpw_sodium'
    assert 'mpw_sodium was required but is not enabled' in cm.value.msg
    assert prober.calls == []

def testResolveMissingLib(capsys):

    registry = makeRegistry()
    states = registry.makeStates()
    prober = cmn.StubProber()

    result = registry.resolve('mpw_xml', OPTIONAL, states, prober)
    assert not result.enabled
    assert result.libs == ()
    err = capsys.readouterr().err
    assert 'mpw_xml was enabled but is missing xml2 library.' in err
    assert 'Will continue with mpw_xml disabled!' in err

    with pytest.raises(DependencyError) as cm:
        registry.resolve('mpw_xml', REQUIRED, states, prober)
    assert cm.value.feature == 'mpw_xml'
    assert cm.value.lib == 'xml2'

def testResolveInvalid():

    registry = makeRegistry()
    states = registry.makeStates()
    prober = cmn.StubProber()

    with pytest.raises(FeatMakeConfError):
        registry.resolve('mpw_sodium', 'sometimes', states, prober)
    with pytest.raises(FeatMakeConfError):
        registry.resolve('mpw_qt', OPTIONAL, states, prober)

def testResolveOnlySecondAuxLib():

    registry = FeatureRegistry([
        makeFeature('with_color', 'curses', auxLibs = ['tinfo', 'gpm']),
    ])
    states = registry.makeStates()
    prober = cmn.StubProber(['curses', 'gpm'])

    result = registry.resolve('with_color', REQUIRED, states, prober)
    assert result.enabled
    assert result.libs == ('curses', 'gpm')

def testResolveTwice():

    registry = makeRegistry()
    states = registry.makeStates()
    prober = cmn.StubProber(['curses'])

    first = registry.resolve('mpw_color', OPTIONAL, states, prober)
    second = registry.resolve('mpw_color', OPTIONAL, states, prober)
    assert first == second
    assert first is not second
    # each resolution probes again
    assert prober.calls == ['curses', 'tinfo', 'curses', 'tinfo']
