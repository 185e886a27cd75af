"""
Photoelectric Effect Simulator Package

This package simulates the photoelectric effect experiment: light of a chosen
wavelength and intensity strikes a metal plate, and the photocurrent is
measured against a variable retarding voltage.

Architecture:
- models/: Physics model, measurement log, and experiment session
- config/: Settings and parameters
- utils/: Data export
- cli.py: Command-line sweep runner
"""

__version__ = "1.0.0"
