# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Here are some extra stuff based on python only built-in ones.
"""

#pylint: disable=invalid-name

from collections.abc import Mapping
maptype = Mapping

stringtype = str # pragma: no cover

def struct(typename, attrnames, frozen = False):
    """
    Generate simple and fast data class.
    If frozen is True then attributes cannot be changed after __init__.
    """

    attrnames = tuple(attrnames.replace(',', ' ').split())
    reprfmt = '(' + ', '.join(name + '=%r' for name in attrnames) + ')'

    def __init__(self, *args, **kwargs):
        if len(args) > len(attrnames):
            msg = "__init__() takes %d positional arguments but %d were given" \
                % (len(attrnames) + 1, len(args) + 1)
            raise AttributeError(msg)
        for name, value in zip(attrnames, args):
            object.__setattr__(self, name, value)
        for name, value in kwargs.items():
            if name not in attrnames:
                msg = "__init__() got an unexpected keyword argument '%s'" % name
                raise TypeError(msg)
            object.__setattr__(self, name, value)
        for name in attrnames:
            if not hasattr(self, name):
                object.__setattr__(self, name, None)

    def __repr__(self):
        """ Return a nicely formatted representation string """
        return self.__class__.__name__ + \
                reprfmt % tuple(getattr(self, x) for x in attrnames)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, x) == getattr(other, x) for x in attrnames)

    def __setattr__(self, name, value):
        raise AttributeError("Object of %r is read-only" % typename)

    namespace = {
        '__doc__'    : '%s(%s)' % (typename, attrnames),
        '__slots__'  : attrnames,
        '__init__'   : __init__,
        '__repr__'   : __repr__,
        '__eq__'     : __eq__,
        '__hash__'   : None,
    }
    if frozen:
        namespace['__setattr__'] = __setattr__

    result = type(typename, (object,), namespace)

    return result

_NOT_FOUND = object()

class cachedprop(object):
    """
    Decorator for cached read-only properties.
    Notice that it cannot be used with __slots__.
    """

    def __init__(self, fget):
        self.fget     = fget
        self.attrname = fget.__name__
        self.__doc__  = fget.__doc__

    def __get__(self, obj, owner = None):

        if obj is None:
            return self

        try:
            cache = obj.__dict__
        except AttributeError:
            msg = "No '__dict__' attribute on %r " % type(obj).__name__
            raise TypeError(msg) from None

        value = cache.get(self.attrname, _NOT_FOUND)
        if value is _NOT_FOUND:
            value = cache[self.attrname] = self.fget(obj)

        return value
