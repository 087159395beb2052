#!/usr/bin/env python
"""
Entry point for running ghsync from a source checkout.

Sets up the Python path and runs the ghsync command line.
"""

import sys
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from ghsync.main import main


if __name__ == "__main__":
    sys.exit(main())
