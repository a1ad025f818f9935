"""
Schema Module - resolved type descriptors and marshaling directions.
"""

from .models import Direction, ResolvedType
from .type_resolver import TypeResolver, resolve_class

__all__ = [
    "Direction",
    "ResolvedType",
    "TypeResolver",
    "resolve_class",
]
