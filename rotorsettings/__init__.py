"""Rotator controller settings, AVR pin mapping and solar position."""

__version__ = "0.1.0"
__all__ = ["pinmap", "settings", "sunpos"]