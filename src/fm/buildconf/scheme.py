# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Scheme of buildconf file. Names of params are the same for .py and .yaml
 files except that in a .py file '-' is replaced by '_' in top-level names.
"""

# Special key for any string key in a dict
ANYSTR_KEY = '_ANYSTR_'

_STRLIST = ('str', 'list-of-strs')

featureScheme = {
    'lib' : { 'type': 'str', 'required' : True },
    'aux-libs' : { 'type': _STRLIST },
    'define' : { 'type': 'str' },
    'includes' : { 'type': _STRLIST },
    'enabled' : { 'type': 'bool' },
    'description' : { 'type': 'str' },
}

targetScheme = {
    'source' : { 'type': _STRLIST, 'required' : True },
    'requires' : { 'type': _STRLIST },
    'optional' : { 'type': _STRLIST },
    'includes' : { 'type': _STRLIST },
    'output' : { 'type': 'str' },
    'description' : { 'type': 'str' },
}

confscheme = {
    'project' : {
        'type' : 'dict',
        'vars' : {
            'name' : { 'type': 'str' },
            'version-define' : { 'type': 'str' },
            'version-match' : { 'type': 'str' },
            'version-file' : { 'type': 'str' },
        },
    },
    'cflags' : { 'type': _STRLIST },
    'ldflags' : { 'type': _STRLIST },
    'features' : {
        'type' : 'dict',
        'vars' : {
            ANYSTR_KEY : { 'type': 'dict', 'vars' : featureScheme },
        },
    },
    'targets' : {
        'type' : 'dict',
        'required' : True,
        'vars' : {
            ANYSTR_KEY : { 'type': 'dict', 'vars' : targetScheme },
        },
    },
    'default-targets' : { 'type': _STRLIST },
}
