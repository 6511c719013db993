"""Normalization constants, Legendre functions and inclination functions for spherical harmonics."""

__version__ = "0.1.0"
__all__ = ["flmp", "nlm", "plm"]