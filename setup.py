
"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import shutil
import fnmatch
if sys.hexversion < 0x3080000:
    raise ImportError('Python >= 3.8 is required')

from setuptools import setup
from setuptools import Command

here = os.path.dirname(os.path.abspath(__file__))
os.chdir(here)

SRC_DIR = 'src'
DEST_DIR = 'dist'

sys.path.insert(0, os.path.join(here, SRC_DIR))
from fm import version
from fm.constants import APPNAME, CAP_APPNAME, AUTHOR

AUTHOR_EMAIL = 'pustotnik@gmail.com'

REPO_URL   = 'https://github.com/pustotnik/featmake'
SRC_URL    = REPO_URL
ISSUES_URL = 'https://github.com/pustotnik/featmake/issues'

DESCRIPTION = '%s - builder of C targets with optional features' % CAP_APPNAME
with open(os.path.join(here, "README.rst"), "r") as fh:
    LONG_DESCRIPTION = fh.read()

CLASSIFIERS = """\
Development Status :: 4 - Beta
License :: OSI Approved :: BSD License
Environment :: Console
Intended Audience :: Developers
Programming Language :: Python
Programming Language :: Python :: 3 :: Only
Programming Language :: Python :: 3.8
Programming Language :: Python :: 3.9
Programming Language :: Python :: 3.10
Programming Language :: Python :: 3.11
Programming Language :: Python :: 3.12
Programming Language :: Python :: Implementation :: CPython
Operating System :: POSIX :: Linux
Operating System :: MacOS
Topic :: Software Development :: Build Tools
""".splitlines()

PYTHON_REQUIRES = '>=3.8'
RUNTIME_DEPS = ['PyYAML']
TESTS_DEPS = ['pytest', 'pytest-mock']

PKG_DIRS = ['fm', 'fm.buildconf']

class clean(Command):

    description = "clean up files from 'setuptools' commands and some extras"

    PATTERNS = '*.pyc *.pyo *.egg-info __pycache__ .pytest_cache .coverage'.split()
    TOP_DIRS = 'build dist'.split() + [DEST_DIR]

    # Support the "all" option. Setuptools expects it in some situations.
    user_options = [
        ('all', 'a', "provided for compatibility"),
    ]

    boolean_options = ['all']

    def initialize_options(self):
        self.all = None

    def finalize_options(self):
        pass

    def run(self):

        remove = []
        for root, dirs, files in os.walk(here):
            for pattern in self.PATTERNS:
                for name in fnmatch.filter(dirs, pattern):
                    remove.append(os.path.join(root, name))
                    dirs.remove(name) # don't visit sub directories
                for name in fnmatch.filter(files, pattern):
                    remove.append(os.path.join(root, name))

        for path in self.TOP_DIRS:
            remove.append(os.path.join(here, path))

        # remove all
        for path in remove:
            if os.path.isdir(path):
                shutil.rmtree(path, ignore_errors = True)
            elif os.path.isfile(path):
                os.remove(path)

cmdclass = {
    'clean': clean,
}

kwargs = dict(
    name = APPNAME,
    version = version.current(),
    license = 'BSD',
    description = DESCRIPTION,
    long_description = LONG_DESCRIPTION,
    long_description_content_type = "text/x-rst",
    url = REPO_URL,
    author = AUTHOR,
    author_email = AUTHOR_EMAIL,
    zip_safe = False,
    packages = PKG_DIRS,
    package_dir = {'': SRC_DIR},
    package_data = {'fm': ['version']},
    classifiers = CLASSIFIERS,
    python_requires = PYTHON_REQUIRES,
    install_requires = RUNTIME_DEPS,
    extras_require = {
        'test' : TESTS_DEPS,
    },
    project_urls = {
        'Bug Tracker' : ISSUES_URL,
        'Source Code' : SRC_URL,
    },
    entry_points = {
        'console_scripts': [
            '%s = fm.starter:main' % APPNAME,
        ],
    },
    cmdclass = cmdclass,
)

def main():
    setup(**kwargs)

if __name__ == '__main__':
    main()
