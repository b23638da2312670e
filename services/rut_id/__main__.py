"""
Entry point for running the RUT CLI as a module.

Usage:
    python -m services.rut_id [args]
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
