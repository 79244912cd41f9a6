#!/usr/bin/env python3
from os import path
import sys

sys.path.append(path.dirname(path.dirname(path.abspath(__file__))))

from currying.cli import main

if __name__ == '__main__':
    sys.exit(main())
