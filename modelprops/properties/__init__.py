"""
Property Resolution Module

Resolves the flat, direction-specific list of documented properties of a type.
"""

from .alternates import AlternateTypeProvider, AlternateTypeRule, OptionalUnwrapRule, non_optional
from .model_property import BeanModelProperty
from .provider import (
    BeanModelPropertyProvider,
    ModelPropertiesProvider,
    ResolutionOutcome,
    ResolutionStatus,
    build_provider,
    index_by_internal_name,
)

__all__ = [
    "AlternateTypeProvider",
    "AlternateTypeRule",
    "BeanModelProperty",
    "BeanModelPropertyProvider",
    "ModelPropertiesProvider",
    "OptionalUnwrapRule",
    "ResolutionOutcome",
    "ResolutionStatus",
    "build_provider",
    "index_by_internal_name",
    "non_optional",
]
