"""
Accessor Resolver Module

Discovers the getters and setters that read or write a type's properties.
"""

from .accessors import (
    AccessorCandidate,
    AccessorKind,
    decapitalize,
    is_getter,
    is_setter,
    property_name,
    split_accessor_name,
)
from .provider import AccessorsProvider

__all__ = [
    "AccessorCandidate",
    "AccessorKind",
    "AccessorsProvider",
    "decapitalize",
    "is_getter",
    "is_setter",
    "property_name",
    "split_accessor_name",
]
