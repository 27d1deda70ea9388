# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Features are optional capabilities of targets. Each feature is gated by a
 compile-time define and needs a library on the host.
"""

from types import MappingProxyType

from fm import log
from fm.pyutils import maptype, struct
from fm.error import FeatMakeConfError, ConfigurationError, DependencyError

REQUIRED = 'required'
OPTIONAL = 'optional'
REQUISITES = (REQUIRED, OPTIONAL)

Feature = struct('Feature',
                 'name, enabledByDefault, lib, auxLibs, define, includes, description',
                 frozen = True)

ResolutionResult = struct('ResolutionResult',
                          'feature, enabled, compileDefines, includes, libs',
                          frozen = True)

def makeFeature(name, lib, auxLibs = (), define = None, includes = (),
                enabledByDefault = True, description = ''):
    """
    Make Feature object. Default define is the upper-cased feature name.
    """

    if not lib:
        raise FeatMakeConfError("Feature %r must have a library" % name)
    if define is None:
        define = name.upper()

    return Feature(name, bool(enabledByDefault), lib, tuple(auxLibs),
                   define, tuple(includes), description)

def _disabled(name):
    return ResolutionResult(name, False, (), (), ())

class FeatureStates(maptype):
    """
    Read-only snapshot of enabled/disabled states of features.
    It's made once from declared defaults plus operator overrides.
    """

    def __init__(self, features, overrides = None):

        states = { x.name: x.enabledByDefault for x in features }
        for name, value in (overrides or {}).items():
            if name not in states:
                raise FeatMakeConfError("Unknown feature %r in overrides" % name)
            states[name] = bool(value)

        self._states = MappingProxyType(states)

    def __getitem__(self, name):
        return self._states[name]

    def __iter__(self):
        return iter(self._states)

    def __len__(self):
        return len(self._states)

    def __repr__(self):
        return 'FeatureStates(%r)' % dict(self._states)

class FeatureRegistry(object):
    """
    Registry of declared features
    """

    def __init__(self, features = ()):
        self._features = {}
        for feature in features:
            self.add(feature)

    def add(self, feature):
        """ Add Feature object """

        if feature.name in self._features:
            raise FeatMakeConfError("Feature %r is declared twice" % feature.name)
        self._features[feature.name] = feature

    def get(self, name):
        """ Get Feature object by name """

        try:
            return self._features[name]
        except KeyError:
            raise FeatMakeConfError("Unknown feature %r" % name) from None

    def names(self):
        """ Get names of features in declared order """
        return list(self._features)

    def __contains__(self, name):
        return name in self._features

    def __iter__(self):
        return iter(self._features.values())

    def __len__(self):
        return len(self._features)

    def makeStates(self, overrides = None):
        """ Make FeatureStates object with overrides applied """
        return FeatureStates(self, overrides)

    def resolve(self, name, requisite, states, prober):
        """
        Resolve feature for one target.
        Returns new ResolutionResult object. Raises ConfigurationError or
        DependencyError if a required feature can not be used.
        """

        if requisite not in REQUISITES:
            raise FeatMakeConfError("Invalid requisite %r for feature %r" % (requisite, name))

        feature = self.get(name)
        required = requisite == REQUIRED

        if not states[name]:
            if required:
                raise ConfigurationError(name)
            log.info("%s is supported but not enabled.", name)
            return _disabled(name)

        if not prober.haslib(feature.lib):
            if required:
                raise DependencyError(name, feature.lib)
            log.warn("%s was enabled but is missing %s library. "
                     "Will continue with %s disabled!", name, feature.lib, name)
            return _disabled(name)

        libs = [feature.lib]
        # aux libs are never load-bearing so missing ones are just skipped
        libs.extend(x for x in feature.auxLibs if prober.haslib(x))

        log.info("Enabled %s (lib%s).", name, feature.lib)
        return ResolutionResult(name, True, ((feature.define, 1),),
                                feature.includes, tuple(libs))
