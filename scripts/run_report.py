#!/usr/bin/env python3
"""
Trait Report Script.

Interprets genotype results for one or more dogs and writes
plain-language trait reports.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from traitreport.cli import main

if __name__ == "__main__":
    sys.exit(main())
