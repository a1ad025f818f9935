"""Resolved model properties - the output unit of property resolution."""

from dataclasses import dataclass
from typing import Any, Dict

from modelprops.accessors.accessors import AccessorCandidate
from modelprops.introspection.definitions import PropertyDefinition
from modelprops.schema.models import Direction, ResolvedType
from .alternates import AlternateTypeProvider


@dataclass(frozen=True)
class BeanModelProperty:
    """
    One documented property: wire name, backing accessor and value type.

    Created per resolution call and never mutated afterwards.
    """

    name: str
    property_definition: PropertyDefinition
    accessor: AccessorCandidate
    direction: Direction
    type: ResolvedType

    @classmethod
    def create(
        cls,
        name: str,
        definition: PropertyDefinition,
        accessor: AccessorCandidate,
        direction: Direction,
        alternate_type_provider: AlternateTypeProvider,
    ) -> "BeanModelProperty":
        """Resolve the accessor's value type (through alternates) and build the property"""
        value_type = alternate_type_provider.alternate_for(accessor.value_type)
        return cls(name, definition, accessor, direction, value_type)

    @property
    def is_getter(self) -> bool:
        return self.accessor.is_getter

    @property
    def for_serialization(self) -> bool:
        return self.direction is Direction.SERIALIZATION

    @property
    def type_name(self) -> str:
        return self.type.name

    @property
    def qualified_type_name(self) -> str:
        return self.type.qualified_name

    @property
    def required(self) -> bool:
        return bool(getattr(self.property_definition, "required", False))

    @property
    def description(self) -> str:
        return getattr(self.property_definition, "description", "") or ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "name": self.name,
            "internal_name": self.property_definition.internal_name,
            "type": self.type_name,
            "qualified_type": self.qualified_type_name,
            "accessor": self.accessor.qualified_name,
            "direction": self.direction.value,
            "required": self.required,
            "description": self.description,
        }
