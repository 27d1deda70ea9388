import sys
from os import path

SRC_DIR = path.dirname(path.abspath(__file__))
SRC_DIR = path.normpath(path.join(SRC_DIR, path.pardir, 'src'))

if SRC_DIR not in sys.path:
    sys.path.insert(1, SRC_DIR)
