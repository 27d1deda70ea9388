# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import tests.common as cmn
from fm.flags import BuildFlags
from fm.features import ResolutionResult

def testDefinesAndIncludes():

    flags = BuildFlags(['-O3'])
    flags.addDefine('MP_VERSION', '2.6-cli-5')
    flags.addDefine('DEBUG')
    flags.addIncludes(['core', 'cli', 'core'])
    assert flags.compileArgs() == [
        '-O3', '-DMP_VERSION=2.6-cli-5', '-DDEBUG', '-Icore', '-Icli'
    ]
    assert flags.linkArgs() == []

def testMerge():

    flags = BuildFlags(['-O3'], ['-L/opt/lib'])
    flags.merge(ResolutionResult('mpw_sodium', True, (('MPW_SODIUM', 1), ),
                                 (), ('sodium', )))
    flags.merge(ResolutionResult('mpw_json', False, (), (), ()))
    flags.merge(ResolutionResult('mpw_color', True, (('MPW_COLOR', 1), ),
                                 ('/usr/include/ncurses', ), ('curses', 'tinfo')))

    assert flags.compileArgs() == [
        '-O3', '-DMPW_SODIUM=1', '-DMPW_COLOR=1', '-I/usr/include/ncurses'
    ]
    assert flags.linkArgs() == ['-L/opt/lib', '-lsodium', '-lcurses', '-ltinfo']

def testCopy():

    flags = BuildFlags(['-O3'])
    flags.addLibs(['m'])
    other = flags.copy()
    other.addLibs(['z'])
    other.cflags.append('-g')
    assert flags.libs == ['m']
    assert flags.cflags == ['-O3']
    assert other.libs == ['m', 'z']

def testCommandLine():

    flags = BuildFlags(['-O3'], ['-s'])
    flags.addDefine('WITH_MATH', 1)
    flags.addLibs(['m'])

    cmdLine = flags.commandLine(cmn.GCC, ('main.c', 'util.c'), 'hello', ['-g'])
    assert cmdLine == [
        '/usr/bin/gcc', '-std=c11', '-O3', '-DWITH_MATH=1', '-g',
        'main.c', 'util.c', '-s', '-lm', '-o', 'hello',
    ]

    flags = BuildFlags()
    assert flags.commandLine(cmn.GCC, ['main.c'], 'a') == \
                ['/usr/bin/gcc', '-std=c11', 'main.c', '-o', 'a']
    assert 'BuildFlags' in repr(flags)
