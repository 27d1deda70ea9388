# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import os
if sys.hexversion < 0x3080000:
    raise ImportError('Python >= 3.8 is required')

#pylint: disable=wrong-import-position
from fm.constants import CWD
from fm import utils

def envFeatureOverrides(featureNames, environ = None):
    """
    Get overrides of features from environment variables with the same
    names as features, e.g. 'mpw_sodium=0'.
    """

    if environ is None:
        environ = os.environ

    overrides = {}
    for name in featureNames:
        val = environ.get(name)
        if val is not None and val.strip():
            overrides[name] = utils.envValToBool(val.strip())
    return overrides

def runBuild(cliArgs, notparsed, startdir = None):
    """
    Run command 'build'.
    """

    if startdir is None:
        startdir = CWD

    from fm.buildconf.processing import ConfManager
    from fm.driver import BuildDriver

    confManager = ConfManager(startdir, cliArgs.buildconf)

    overrides = envFeatureOverrides(confManager.features.names())
    overrides.update(cliArgs.overrides)

    driver = BuildDriver(
        confManager,
        targets = cliArgs.targets,
        overrides = overrides,
        cflags = cliArgs.cflags,
        ldflags = cliArgs.ldflags,
        passThroughArgs = notparsed,
        workdir = startdir,
    )
    driver.run()
    return 0

def run(argv = None):
    """
    Prepare and run FeatMake. Returns exit code.
    """

    from fm import cli, log, error

    if argv is None:
        argv = sys.argv

    cmd = None
    try:
        cmd = cli.parseAll(argv)

        error.verbose = cmd.args.verbose
        log.setVerbose(cmd.args.verbose)

        if cmd.name == 'version':
            from fm import version
            log.pprint('NORMAL', version.versionText(cmd.args.verbose))
            return 0

        log.enableColorsByCli(cmd.args.color)
        return runBuild(cmd.args, cmd.notparsed)

    except error.FeatMakeError as ex:
        verbose = 0
        if cmd:
            verbose = cmd.args.verbose
        if verbose > 1 and ex.fullmsg != ex.msg:
            log.pprint('RED', ex.fullmsg, stream = sys.stderr)
        log.error(ex.msg)
        return 1
    except KeyboardInterrupt:
        log.pprint('RED', 'Interrupted', stream = sys.stderr)
        return 68

def main():
    """ Entry point for console script """
    sys.exit(run())
