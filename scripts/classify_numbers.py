#!/usr/bin/env python3
"""
Number Form Classification Script.

Classifies each input as a roman numeral or an arabic number and
optionally writes JSON and Markdown reports.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.classification.cli import main

if __name__ == "__main__":
    sys.exit(main())
