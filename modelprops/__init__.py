"""
modelprops - resolves the documented properties of Python classes.

For a class, answers which properties it exposes when serialized or
deserialized, under which external names, backed by which accessor.
"""

__version__ = "0.1.0"

from .config import AppConfig, MarshalingProfile, Visibility
from .exceptions import (
    CyclicUnwrapError,
    IntrospectionError,
    ModelPropsError,
    ProfileNotConfiguredError,
    TargetImportError,
    TypeResolutionError,
)
from .properties import BeanModelProperty, BeanModelPropertyProvider, build_provider
from .schema import Direction, ResolvedType, TypeResolver, resolve_class

__all__ = [
    "__version__",
    "AppConfig",
    "BeanModelProperty",
    "BeanModelPropertyProvider",
    "CyclicUnwrapError",
    "Direction",
    "IntrospectionError",
    "MarshalingProfile",
    "ModelPropsError",
    "ProfileNotConfiguredError",
    "ResolvedType",
    "TargetImportError",
    "TypeResolutionError",
    "TypeResolver",
    "Visibility",
    "build_provider",
    "resolve_class",
]
