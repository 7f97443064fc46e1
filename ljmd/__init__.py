"""Molecular dynamics of Lennard-Jones fluids in the NVE ensemble."""

__version__ = "0.1.0"