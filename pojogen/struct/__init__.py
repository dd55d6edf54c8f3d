"""
Structural model consumed by the generator.

Provides the immutable struct and attribute descriptions.
"""

from .attribute import StructAttribute
from .struct import Struct, StructBuilder

__all__ = [
    "Struct",
    "StructAttribute",
    "StructBuilder",
]
