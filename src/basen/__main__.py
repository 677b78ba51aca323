"""
basen package entry point.

Allows running: python -m basen <action> <value> [options]
"""
import sys
from .api.cli import main

if __name__ == "__main__":
    sys.exit(main())
