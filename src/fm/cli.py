# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import argparse
from collections import defaultdict

from fm.constants import APPNAME, CAP_APPNAME, ENV_CFLAGS, ENV_LDFLAGS, ENV_TARGETS
from fm.pyutils import struct
from fm.utils import toList
from fm import log
from fm.error import FeatMakeLogicError
from fm.autodict import AutoDict as _AutoDict

ParsedCommand = struct('ParsedCommand', 'name, args, notparsed, orig')

"""
Contains configurable 'commands', 'options' and 'posargs'
"""
config = _AutoDict()

class Command(_AutoDict):
    """ Class to set up a command for CLI """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setdefault('aliases', [])
        self.setdefault('usageTextTempl', "%s [options]")

# Declarative list of commands in CLI
config.commands = [
    Command(
        name = 'help',
        description = 'show help for a given topic or a help overview',
        usageTextTempl = "%s [command/topic]",
    ),
    Command(
        name = 'build',
        aliases = ['bld'],
        description = 'build selected targets',
        usageTextTempl = "%s [options] [target [target] ... ] [-- compiler args]",
    ),
    Command(
        name = 'version',
        aliases = ['ver'],
        description = 'print version of %s' % APPNAME,
    ),
]

# map: cmd name/alias -> Command
def _makeCmdNameMap():
    cmdNameMap = {}
    for cmd in config.commands:
        cmdNameMap[cmd.name] = cmd
        for alias in cmd.aliases:
            cmdNameMap[alias] = cmd
    return cmdNameMap

class PosArg(_AutoDict):
    """ Class to set up positional param for CLI """

    NOTARGPARSE_FIELDS = ('name', 'commands')

# Declarative list of positional args after command name in CLI
config.posargs = [
    PosArg(
        name = 'targets',
        nargs = '*', # optional list of args
        default = [],
        help = "select targets from buildconf, 'all' for all targets, "
               "default targets if nothing is selected",
        commands = ['build'],
    ),
]

class Option(_AutoDict):
    """ Class to set up an option for CLI """

    NOTARGPARSE_FIELDS = ('names', 'commands', 'runcmd', 'isglobal')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setdefault('isglobal', False)
        self.setdefault('commands', [])
        self.setdefault('action', 'store')
        self.setdefault('type', None)
        self.setdefault('choices', None)
        self.setdefault('default', None)

# Declarative list of options in CLI
config.options = [
    # global options that are used before command in cmd line
    Option(
        names = ['-h', '--help'],
        isglobal = True,
        action = 'help',
        help = 'show this help message and exit',
    ),
    Option(
        names = ['--version'],
        isglobal = True,
        runcmd = 'version',
        help = 'alias for command "version"',
    ),
    # command options
    Option(
        names = ['-h', '--help'],
        action = 'help',
        commands = [x.name for x in config.commands], # for all commands
        help = 'show this help message for command and exit',
    ),
    Option(
        names = ['-e', '--enable'],
        dest = 'enable',
        action = 'append',
        metavar = 'FEATURE',
        commands = ['build'],
        help = 'enable feature, can be used many times',
    ),
    Option(
        names = ['-d', '--disable'],
        dest = 'disable',
        action = 'append',
        metavar = 'FEATURE',
        commands = ['build'],
        help = 'disable feature, can be used many times',
    ),
    Option(
        names = ['--cflags'],
        commands = ['build'],
        help = 'base compiler flags',
    ),
    Option(
        names = ['--ldflags'],
        commands = ['build'],
        help = 'base linker flags',
    ),
    Option(
        names = ['--buildconf'],
        commands = ['build'],
        help = 'name of buildconf file in the current directory',
    ),
    Option(
        names = ['-v', '--verbose'],
        action = "count",
        commands = [x.name for x in config.commands if x.name != 'help'],
        help = 'verbosity level -v or -vv',
    ),
    Option(
        names = ['--color'],
        choices = ('yes', 'no', 'auto'),
        commands = ['build'],
        help = 'whether to use colors (yes/no/auto)',
    ),
]

config.optdefaults = {
    'verbose': 0,
}

def _getReadyOptDefaults():

    # These params should be obtained only before parsing but
    # not when current python has loaded.
    _getenv = os.environ.get
    config.optdefaults.update({
        'color': _getenv('NOCOLOR', '') and 'no' or 'auto',
        'cflags' : _getenv(ENV_CFLAGS, None),
        'ldflags' : _getenv(ENV_LDFLAGS, None),
    })

    return config.optdefaults

class CmdLineParser(object):
    """
    CLI for FeatMake.
    """

    __slots__ = (
        '_defaults', '_globalOptions', '_command',
        '_parser', '_commandHelps', '_cmdNameMap', '_origArgs',
    )

    def __init__(self, progName, defaults):

        self._defaults = defaultdict(dict)
        self._defaults.update(_getReadyOptDefaults())
        self._defaults.update(defaults)

        self._command = None
        self._origArgs = None

        self._globalOptions = [x for x in config.options if x.isglobal]
        self._cmdNameMap = _makeCmdNameMap()

        class MyHelpFormatter(argparse.HelpFormatter):
            """ Some customization"""
            def __init__(self, prog):
                super().__init__(prog, max_help_position = 27)
                self._action_max_length = 23

        kwargs = dict(
            prog = progName,
            formatter_class = MyHelpFormatter,
            description = '%s: builder of targets with optional features' % CAP_APPNAME,
            usage = "%(prog)s <command> [options] [args]",
            add_help = False
        )
        self._parser = argparse.ArgumentParser(**kwargs)

        groupGlobal = self._parser.add_argument_group('global options')
        self._addOptions(groupGlobal, cmd = None)

        kwargs = dict(
            title = 'list of commands',
            help = '', metavar = '', dest = 'command'
        )
        subparsers = self._parser.add_subparsers(**kwargs)

        commandHelps = _AutoDict()
        helpCmd = None
        for cmd in config.commands:
            commandHelps[cmd.name] = _AutoDict()
            cmdHelpInfo = commandHelps[cmd.name]
            cmdHelpInfo.usage = self._makeCmdUsageText(progName, cmd)
            cmdHelpInfo.help = cmd.description
            cmdHelpInfo.description = cmd.description.capitalize()
            cmdHelpInfo.aliases = cmd.aliases

            if cmd.name == 'help': # It will be processed below
                helpCmd = cmd
                continue

            kwargs = cmdHelpInfo
            kwargs['add_help'] = False
            cmdParser = subparsers.add_parser(cmd.name, **kwargs)

            self._addCmdPosArgs(cmdParser, cmd)

            groupCmdOpts = cmdParser.add_argument_group('command options')
            self._addOptions(groupCmdOpts, cmd = cmd)
            cmdHelpInfo.help = cmdParser.format_help()

        # special case for 'help' command
        if helpCmd is None:
            raise FeatMakeLogicError("Programming error: no command "
                                     "'help' in config.commands") # pragma: no cover
        cmd = helpCmd
        kwargs = commandHelps[cmd.name]
        kwargs['add_help'] = True
        cmdParser = subparsers.add_parser(cmd.name, **kwargs)
        cmdParser.add_argument('topic', nargs='?', default = 'overview')

        self._commandHelps = commandHelps

    def _getOptionDefault(self, opt):
        optName = opt.names[-1].replace('-', '', 2)
        return self._defaults.get(optName, None)

    @staticmethod
    def _joinCmdNameWithAliases(cmd):
        if not cmd.aliases:
            return cmd.name
        return cmd.name + '|' + '|'.join(cmd.aliases)

    @staticmethod
    def _makeCmdUsageText(progName, cmd):
        template = "%s " + cmd.usageTextTempl
        return template % (progName, CmdLineParser._joinCmdNameWithAliases(cmd))

    def _showHelp(self, cmdHelps, topic):
        if topic == 'overview':
            self._parser.print_help()
            return True

        _topic = self._cmdNameMap.get(topic, None)
        if _topic:
            _topic = _topic.name

        if _topic is None or _topic not in cmdHelps:
            log.error("Unknown command/topic to show help: '%s'", topic)
            return False

        print(cmdHelps[_topic]['help'])
        return True

    def _addCmdPosArgs(self, target, cmd):
        posargs = [x for x in config.posargs if cmd.name in x.commands]
        for arg in posargs:
            kwargs = _AutoDict()
            for k, v in arg.items():
                if v is None or k in PosArg.NOTARGPARSE_FIELDS:
                    continue
                kwargs[k] = v
            target.add_argument(arg.name, **kwargs)

    def _addOptions(self, target, cmd = None):
        if cmd is None:
            # get only global options
            options = self._globalOptions
        else:
            def isvalid(opt):
                if opt.isglobal:
                    return False
                return cmd.name in opt.commands
            options = [x for x in config.options if isvalid(x)]

        for opt in options:
            kwargs = _AutoDict()
            for k, v in opt.items():
                if v is None or k in Option.NOTARGPARSE_FIELDS:
                    continue
                kwargs[k] = v

            if 'runcmd' in opt:
                kwargs.action = "store_true"
                kwargs.help = opt.help
            elif kwargs.action not in ('help', 'append'):
                default = self._getOptionDefault(opt)
                if default is not None:
                    kwargs['default'] = default
                    kwargs['help'] += ' [default: %r]' % kwargs['default']

            target.add_argument(*opt.names, **kwargs)

    def _fillCmdInfo(self, parsedArgs, notparsed):
        args = _AutoDict(vars(parsedArgs))
        for opt in self._globalOptions:
            if 'runcmd' in opt:
                optName = opt.names[-1].replace('-', '', 2)
                args.pop(optName, None)
        cmd = self._cmdNameMap[args.pop('command')]
        self._command = ParsedCommand(
            name = cmd.name,
            args = args,
            notparsed = notparsed,
            orig = self._origArgs,
        )

    def _postProcess(self):
        args = self._command.args
        if self._command.name != 'build':
            return

        if not args.targets:
            args.targets = toList(os.environ.get(ENV_TARGETS, ''))

        overrides = {}
        for name in args.pop('enable', None) or []:
            overrides[name] = True
        for name in args.pop('disable', None) or []:
            overrides[name] = False
        args.overrides = overrides

        for name in ('cflags', 'ldflags'):
            val = args.get(name)
            if val is not None:
                args[name] = toList(val)

    def parse(self, args = None, defaultCmd = 'build'):
        """ Parse command line args """

        if args is None:
            args = sys.argv[1:]

        args = list(args)
        self._origArgs = list(args)
        _args = []
        notparsed = []
        for i, arg in enumerate(args):
            if arg == '--':
                notparsed = args[i+1:]
                break
            _args.append(arg)
        args = _args

        globalOpts = self._globalOptions
        if args:
            for opt in globalOpts:
                runcmd = opt.get('runcmd')
                if runcmd and args[0] in opt.names:
                    # convert option into corresponding command
                    args[0] = runcmd
                    break

        # simple hack to set default command
        if not args or args[0] not in self._cmdNameMap:
            # don't use global options for default command
            forbiddenNames = [y for x in globalOpts for y in x.names]
            if not any(x in forbiddenNames for x in args):
                args.insert(0, defaultCmd)

        # parse
        parsedArgs = self._parser.parse_args(args)
        cmd = self._cmdNameMap[parsedArgs.command]

        if cmd.name == 'help':
            self._fillCmdInfo(parsedArgs, notparsed)
            sys.exit(not self._showHelp(self._commandHelps, parsedArgs.topic))

        self._fillCmdInfo(parsedArgs, notparsed)
        self._postProcess()
        return self._command

    @property
    def command(self):
        """ current command after last parsing of command line"""
        return self._command

def parseAll(args, defaults = None):
    """
    Parse all command line args with CmdLineParser.
    Returns selected command as object of ParsedCommand.
    """

    if defaults is None:
        defaults = {}
    parser = CmdLineParser(APPNAME, defaults)
    return parser.parse(args[1:])
