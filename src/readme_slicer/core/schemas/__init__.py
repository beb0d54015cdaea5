"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import validate_layout, ValidationError

__all__ = [
    "validate_layout",
    "ValidationError",
]
