"""
Property Introspection Module

Derives canonical, direction-specific property definitions for a class from
its structure and marshaling markers.
Supports:
- Getter/setter/property/field member discovery
- Renaming, ignoring and access restriction
- Unwrapped property detection
"""

from .bean_introspector import BeanIntrospector
from .definitions import AnnotatedMember, BeanPropertyDefinition, MemberKind, PropertyDefinition

__all__ = [
    "AnnotatedMember",
    "BeanIntrospector",
    "BeanPropertyDefinition",
    "MemberKind",
    "PropertyDefinition",
]
