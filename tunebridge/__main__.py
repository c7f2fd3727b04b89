#!/usr/bin/env python3
"""
TuneBridge CLI entry point: allows running the demo with "python -m tunebridge"
"""
import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
