#!/usr/bin/env python3
"""Entry point for running booksource as a module.

This allows the package to be executed as:
    python -m booksource [arguments]
"""

import sys

from booksource.cli import main

if __name__ == "__main__":
    sys.exit(main())
