# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from fm.error import FeatMakeConfError, FeatMakeConfTypeError, FeatMakeConfValueError
from fm.pyutils import maptype, stringtype
from fm.buildconf.scheme import confscheme, ANYSTR_KEY

class Validator(object):
    """
    Validator for structure of buidconf.
    """

    __slots__ = ('_conf', '_confpath')

    _typeHandlerNames = {
        'bool' : '_handleBool',
        'str'  : '_handleStr',
        'dict' : '_handleDict',
        'list-of-strs' : '_handleListOfStrs',
    }

    def __init__(self, buildconf):
        self._confpath = getattr(buildconf, '__file__', None)
        self._conf = { k.replace('_', '-'): v for k, v in vars(buildconf).items()
                       if not k.startswith('_') }

    @staticmethod
    def _checkStrKey(key, fullkey):
        if not isinstance(key, stringtype):
            msg = "Type of key `%r` is invalid. In %r this key should be string." \
                % (key, fullkey)
            raise FeatMakeConfTypeError(msg)

    def _handleBool(self, value, _, fullkey):
        if not isinstance(value, bool):
            msg = "Param %r should be bool" % fullkey
            raise FeatMakeConfTypeError(msg)

    def _handleStr(self, value, _, fullkey):
        if not isinstance(value, stringtype):
            msg = "Param %r should be string" % fullkey
            raise FeatMakeConfTypeError(msg)

    def _handleListOfStrs(self, value, _, fullkey):
        if not isinstance(value, (list, tuple)) or \
                not all(isinstance(x, stringtype) for x in value):
            msg = "Param %r should be list of strings" % fullkey
            raise FeatMakeConfTypeError(msg)

    def _handleDict(self, value, schemeAttrs, fullkey):
        if not isinstance(value, maptype):
            msg = "Param %r should be dict or another map type." % fullkey
            raise FeatMakeConfTypeError(msg)

        self._validateItems(value, schemeAttrs.get('vars', {}), fullkey)

    def _handleParam(self, value, schemeAttrs, fullkey):

        types = schemeAttrs['type']
        if isinstance(types, stringtype):
            types = (types, )

        for _type in types:
            handler = getattr(self, self._typeHandlerNames[_type])
            try:
                handler(value, schemeAttrs, fullkey)
            except FeatMakeConfTypeError:
                if len(types) == 1:
                    raise
            else:
                return

        typeswitch = {
            'str'         : 'string',
            'list-of-strs': 'list of strings',
        }
        typeNames = [ typeswitch.get(_type, _type) for _type in types ]
        msg = "Value `%r` is invalid for the param %r." % (value, fullkey)
        msg += " It should be %s." % " or ".join(typeNames)
        raise FeatMakeConfTypeError(msg)

    def _validateItems(self, items, scheme, parentKey):

        for key, attrs in scheme.items():
            if key != ANYSTR_KEY and attrs.get('required') and key not in items:
                fullkey = '%s.%s' % (parentKey, key) if parentKey else key
                raise FeatMakeConfValueError("Param %r is required" % fullkey)

        for key, value in items.items():
            fullkey = '%s.%s' % (parentKey, key) if parentKey else key
            self._checkStrKey(key, fullkey)
            attrs = scheme.get(key, scheme.get(ANYSTR_KEY))
            if attrs is None:
                msg = "Unknown name %r in %r" % (key, parentKey or 'buildconf')
                raise FeatMakeConfValueError(msg)
            self._handleParam(value, attrs, fullkey)

    def run(self):
        """
        Validate buildconf. Raises FeatMakeConfError on any problem.
        """

        confpath = self._confpath
        try:
            self._validateItems(self._conf, confscheme, '')
        except FeatMakeConfError as ex:
            raise type(ex)(ex.msg, confpath = confpath) from ex
