# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from copy import deepcopy

from fm.utils import uniqueListWithOrder

class BuildFlags(object):
    """
    Structured compile/link configuration of one target.
    It's rendered into a flat list of args only by 'commandLine'.
    """

    __slots__ = ('cflags', 'ldflags', 'defines', 'includes', 'libs')

    def __init__(self, cflags = None, ldflags = None):
        self.cflags = list(cflags or [])
        self.ldflags = list(ldflags or [])
        self.defines = [] # list of pairs (name, value or None)
        self.includes = []
        self.libs = []

    def copy(self):
        """ Make a deep copy """
        return deepcopy(self)

    def __deepcopy__(self, memo):
        result = BuildFlags(self.cflags, self.ldflags)
        result.defines = list(self.defines)
        result.includes = list(self.includes)
        result.libs = list(self.libs)
        return result

    def addDefine(self, name, value = None):
        """ Add compile-time define """
        self.defines.append((name, value))

    def addIncludes(self, paths):
        """ Add include paths in the same order """
        self.includes.extend(paths)

    def addLibs(self, libs):
        """ Add library references in the same order """
        self.libs.extend(libs)

    def merge(self, resolution):
        """ Add flags of ResolutionResult object """

        if not resolution.enabled:
            return
        for define in resolution.compileDefines:
            self.addDefine(*define)
        self.addIncludes(resolution.includes)
        self.addLibs(resolution.libs)

    def compileArgs(self):
        """
        Get list of compiler args: base flags, defines, include paths
        """

        args = list(self.cflags)
        for name, value in self.defines:
            if value is None:
                args.append('-D%s' % name)
            else:
                args.append('-D%s=%s' % (name, value))
        args.extend('-I%s' % x for x in uniqueListWithOrder(self.includes))
        return args

    def linkArgs(self):
        """
        Get list of linker args: base flags, libs
        """

        args = list(self.ldflags)
        args.extend('-l%s' % x for x in self.libs)
        return args

    def commandLine(self, toolchain, sources, output, extraArgs = None):
        """
        Make full command line to build an executable.
        Libs go after sources as some linkers resolve symbols in one pass.
        """

        cmdLine = [toolchain.path]
        cmdLine.extend(toolchain.args)
        cmdLine.extend(self.compileArgs())
        cmdLine.extend(extraArgs or [])
        cmdLine.extend(sources)
        cmdLine.extend(self.linkArgs())
        cmdLine.extend(['-o', output])
        return cmdLine

    def __repr__(self):
        return 'BuildFlags(compile=%r, link=%r)' % (self.compileArgs(), self.linkArgs())
