"""
Service-level exceptions.

This module contains exceptions that can be raised by the energy model
services in the application.
"""

class EnergyModelError(Exception):
    """Base exception for energy model errors."""
    pass

class InvalidCycleLengthError(EnergyModelError, ValueError):
    """Raised when a cycle length cannot be used to place a day in the cycle."""
    pass
