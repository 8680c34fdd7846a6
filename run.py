"""
Development runner script for the field validator demo.
This script allows running the demo without installation.
"""

import os
import sys

# Add src directory to Python path for local development
sys.path.insert(0, os.path.abspath("src"))

from validator_gui.main import main

if __name__ == "__main__":
    raise SystemExit(main())
