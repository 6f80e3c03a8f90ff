#!/usr/bin/env python
"""
Venue Data Crawler - CLI

Scan an exported editor snapshot for venues with missing contact data.

Usage:
    python scan.py snapshot.json
    python scan.py snapshot.json --extract critical -o results.json
"""

import sys
from venue_crawler.cli import main

if __name__ == "__main__":
    sys.exit(main())
