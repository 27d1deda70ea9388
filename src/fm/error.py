# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import traceback

verbose = 0

class FeatMakeError(Exception):
    """Base class for all FeatMake errors"""

    def __init__(self, msg = None, ex = None):
        if msg is None:
            msg = ''
        if ex and not msg:
            msg = str(ex)
        super().__init__(msg)

        self.msg = msg
        self.fullmsg = msg
        if ex is not None and verbose > 0:
            lines = traceback.format_exception(type(ex), ex, ex.__traceback__)
            self.fullmsg = '%s\n%s' % (msg, ''.join(lines))

    def __str__(self):
        return self.msg

class FeatMakeLogicError(FeatMakeError):
    """Some logic/programming error"""

class FeatMakeConfError(FeatMakeError):
    """Invalid buildconf file error"""

    def __init__(self, msg = None, ex = None, confpath = None):
        if msg is None:
            msg = ''
        if confpath and msg:
            _msg = "Error in the file %r:" % confpath
            for line in msg.splitlines():
                _msg += "\n  %s" % line
            msg = _msg
        self.confpath = confpath
        super().__init__(msg, ex)

class FeatMakeConfTypeError(FeatMakeConfError):
    """Invalid buildconf param type error"""

class FeatMakeConfValueError(FeatMakeConfError):
    """Invalid buildconf param value error"""

class FeatMakeProcessFailed(FeatMakeError):
    """ Process failed with exitcode """

    def __init__(self, cmd, exitcode, msg = None):
        self.cmd = cmd
        self.exitcode = exitcode
        if not msg:
            msg = "Command %r failed with exit code %d." % (cmd, exitcode)
        super().__init__(msg)

class ToolchainError(FeatMakeError):
    """ No usable compiler frontend was found """

class ConfigurationError(FeatMakeError):
    """ A required feature is disabled by the operator """

    def __init__(self, feature, msg = None):
        self.feature = feature
        if not msg:
            msg = "%s was required but is not enabled. Please enable the " \
                  "option or remove this target before continuing." % feature
        super().__init__(msg)

class DependencyError(FeatMakeError):
    """ The primary library of a required feature is not linkable """

    def __init__(self, feature, lib, msg = None):
        self.feature = feature
        self.lib = lib
        if not msg:
            msg = "%s was enabled but is missing %s library. Please install " \
                  "this library before continuing." % (feature, lib)
        super().__init__(msg)

class CompileError(FeatMakeProcessFailed):
    """ Compiler invocation for a target failed """

    def __init__(self, target, cmd, exitcode):
        self.target = target
        msg = "Building of the target %r failed: " % target
        msg += "compiler exited with code %d." % exitcode
        super().__init__(cmd, exitcode, msg)
