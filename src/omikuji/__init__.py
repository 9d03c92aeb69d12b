"""sha-omikuji - deterministic SHA-256 fortune slips for the new year."""

__version__ = "0.1.0"
__author__ = "elzup"
__description__ = "SHA-256 based deterministic fortune telling CLI"

from . import fortune

__all__ = ["fortune"]
