# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from fm.pyutils import cachedprop
from fm.utils import toList
from fm.error import FeatMakeConfError
from fm.features import FeatureRegistry, makeFeature
from fm.targets import TargetRegistry, makeTarget
from fm.buildconf import loader

class ConfManager(object):
    """
    Class to make registries of features and targets from buildconf
    """

    def __init__(self, startdir, filename = None, buildconf = None):
        """
        Param 'buildconf' can be used to set already loaded buildconf.
        """

        self.startdir = startdir
        if buildconf is None:
            buildconf = loader.load(startdir, filename)
        self._conf = buildconf
        self.confpath = getattr(buildconf, '__file__', None)

    def _get(self, name):
        return getattr(self._conf, name)

    @cachedprop
    def project(self):
        """ Project settings as a dict """
        return dict(self._get('project'))

    @cachedprop
    def cflags(self):
        """ Default base compile flags as a list """
        return list(toList(self._get('cflags')))

    @cachedprop
    def ldflags(self):
        """ Default base link flags as a list """
        return list(toList(self._get('ldflags')))

    @cachedprop
    def features(self):
        """ FeatureRegistry object """

        registry = FeatureRegistry()
        for name, params in self._get('features').items():
            feature = self._call(makeFeature, name,
                lib = params['lib'],
                auxLibs = toList(params.get('aux-libs', [])),
                define = params.get('define'),
                includes = toList(params.get('includes', [])),
                enabledByDefault = params.get('enabled', True),
                description = params.get('description', ''),
            )
            registry.add(feature)
        return registry

    @cachedprop
    def targets(self):
        """ TargetRegistry object """

        features = self.features
        registry = TargetRegistry()
        for name, params in self._get('targets').items():
            target = self._call(makeTarget, name,
                sources = params['source'],
                required = params.get('requires', []),
                optional = params.get('optional', []),
                output = params.get('output'),
                includes = params.get('includes', []),
                description = params.get('description', ''),
            )
            unknown = [x for x in target.required + target.optional if x not in features]
            if unknown:
                msg = "Target %r uses unknown feature(s): %s" % (name, ', '.join(unknown))
                raise FeatMakeConfError(msg, confpath = self.confpath)
            registry.add(target)

        self._call(registry.setDefaults, self._get('default-targets'))
        return registry

    def _call(self, func, *args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FeatMakeConfError as ex:
            if ex.confpath:
                raise
            raise FeatMakeConfError(ex.msg, confpath = self.confpath) from ex
