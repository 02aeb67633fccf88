"""
TikSave - Entry Point
=====================

Main entry point when running from a checkout.

Author: حَـــــنَّـــــا
"""

import os
import sys

# Add the checkout root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from tiksave.__main__ import run


if __name__ == "__main__":
    run()
