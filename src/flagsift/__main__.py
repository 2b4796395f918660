#!/usr/bin/env python3
"""Entry point for ``python -m flagsift``."""

import sys

from flagsift.application import main

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
