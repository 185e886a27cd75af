"""
Photoelectric package entry point.

Allows running the simulator as a module:
    python -m photoelectric
    python -m photoelectric --metal Cs --wavelength 450 --output data/
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
