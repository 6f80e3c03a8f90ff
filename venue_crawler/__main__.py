"""
Package entry point.

Allows running: python -m venue_crawler snapshot.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
