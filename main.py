#!/usr/bin/env python3
"""modelprops - Entry point."""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from modelprops.cli.main import main

if __name__ == "__main__":
    main()
