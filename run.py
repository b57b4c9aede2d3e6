#!/usr/bin/env python3
"""
run.py - Main entry point for connect-N

Examples:
    python run.py play
    python run.py play --player Ann:red --player Bo:black --player Cy:red --player Di:black
    python run.py simulate --games 500 --rows 5 --cols 5 --connect 3
"""

import sys

from connectn.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
