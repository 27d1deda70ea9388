# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from fm.pyutils import stringtype, struct
from fm.utils import toList, uniqueListWithOrder
from fm.constants import TARGETS_WILDCARD
from fm.error import FeatMakeConfError

Target = struct('Target',
                'name, sources, required, optional, output, includes, description',
                frozen = True)

def makeTarget(name, sources, required = (), optional = (), output = None,
               includes = (), description = ''):
    """
    Make Target object. Default output name is the name of the target.
    """

    sources = tuple(toList(sources))
    if not sources:
        raise FeatMakeConfError("Target %r has no source files" % name)

    required = tuple(uniqueListWithOrder(toList(required)))
    optional = tuple(uniqueListWithOrder(toList(optional)))
    both = set(required) & set(optional)
    if both:
        msg = "Target %r has features both required and optional: %s" \
                % (name, ', '.join(sorted(both)))
        raise FeatMakeConfError(msg)

    return Target(name, sources, required, optional, output or name,
                  tuple(toList(includes)), description)

class TargetRegistry(object):
    """
    Registry of declared targets. Order of declaration is the build order.
    """

    def __init__(self, targets = (), defaults = None):
        self._targets = {}
        for target in targets:
            self.add(target)
        self._defaults = []
        if defaults is not None:
            self.setDefaults(defaults)

    def add(self, target):
        """ Add Target object """

        if target.name in self._targets:
            raise FeatMakeConfError("Target %r is declared twice" % target.name)
        self._targets[target.name] = target

    def get(self, name):
        """ Get Target object by name """

        try:
            return self._targets[name]
        except KeyError:
            raise FeatMakeConfError("Unknown target %r" % name) from None

    def names(self):
        """ Get names of targets in declared order """
        return list(self._targets)

    def __contains__(self, name):
        return name in self._targets

    def __iter__(self):
        return iter(self._targets.values())

    def __len__(self):
        return len(self._targets)

    @property
    def defaults(self):
        """ Names of targets built when nothing is selected """
        return list(self._defaults)

    def setDefaults(self, names):
        """ Set names of targets built when nothing is selected """

        names = toList(names)
        self._checkNames(names)
        self._defaults = uniqueListWithOrder(names)

    def _checkNames(self, names):
        unknown = [x for x in names if x != TARGETS_WILDCARD and x not in self._targets]
        if unknown:
            msg = "Unknown target(s): %s." % ', '.join(unknown)
            msg += " Known targets: %s." % ', '.join(self._targets)
            raise FeatMakeConfError(msg)

    def select(self, names = None):
        """
        Get selected Target objects in declared order.
        Param 'names' can be a list of names, a string with names
        separated by spaces, 'all' or None/empty for the default targets.
        """

        if isinstance(names, stringtype):
            names = toList(names)
        if not names:
            names = self._defaults

        self._checkNames(names)
        if TARGETS_WILDCARD in names:
            return list(self._targets.values())

        selected = set(names)
        return [x for x in self._targets.values() if x.name in selected]
