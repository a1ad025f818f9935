"""
Property definitions - the introspector's view of one logical property.

A definition groups the members (getter, setter, field) that back one
property and carries the marshaling configuration merged across them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from modelprops.annotations import Access, JsonProperty
from modelprops.naming.policy import NamingPolicy
from modelprops.schema.models import Direction


class MemberKind(str, Enum):
    GETTER = "getter"
    SETTER = "setter"
    FIELD = "field"


@dataclass(frozen=True)
class AnnotatedMember:
    """One member backing a property, with its marker if any"""
    name: str                      # method, property or field name
    kind: MemberKind
    declaring_type: type
    raw: Optional[Callable] = None  # None for fields
    annotation: Any = None          # declared field type
    marker: Optional[JsonProperty] = None

    @property
    def is_method(self) -> bool:
        return self.kind is not MemberKind.FIELD

    @property
    def is_getter(self) -> bool:
        return self.kind is MemberKind.GETTER

    @property
    def is_unwrapped(self) -> bool:
        return self.marker is not None and self.marker.unwrapped


class PropertyDefinition(ABC):
    """
    Capability the resolution engine relies on; independent of how a type
    declares its marshaling configuration.
    """

    @property
    @abstractmethod
    def internal_name(self) -> str:
        """Code-level name before any renaming"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Explicit name if configured, otherwise the internal name"""

    @property
    @abstractmethod
    def has_explicit_name(self) -> bool:
        ...

    @abstractmethod
    def primary_member(self) -> Optional[AnnotatedMember]:
        """Member treated as canonical for the definition's direction"""

    @abstractmethod
    def is_unwrapped(self) -> bool:
        """True if the value's own properties are inlined into the owner"""


@dataclass(frozen=True)
class BeanPropertyDefinition(PropertyDefinition):
    """Property definition of a plain Python class (methods, properties, annotations)"""

    implicit_name: str
    direction: Direction
    getter: Optional[AnnotatedMember] = None
    setter: Optional[AnnotatedMember] = None
    field: Optional[AnnotatedMember] = None
    explicit_name: Optional[str] = None
    unwrapped: bool = False
    required: bool = False
    description: str = ""
    access: Access = Access.AUTO
    naming_policy: Optional[NamingPolicy] = None  # class-level override

    @property
    def internal_name(self) -> str:
        return self.implicit_name

    @property
    def name(self) -> str:
        return self.explicit_name or self.implicit_name

    @property
    def has_explicit_name(self) -> bool:
        return bool(self.explicit_name)

    def primary_member(self) -> Optional[AnnotatedMember]:
        if self.direction is Direction.SERIALIZATION:
            return self.getter or self.field
        return self.setter or self.field or self.getter

    def is_unwrapped(self) -> bool:
        return self.unwrapped

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        primary = self.primary_member()
        return {
            "internal_name": self.internal_name,
            "name": self.name,
            "direction": self.direction.value,
            "primary_member": primary.name if primary else None,
            "unwrapped": self.unwrapped,
            "required": self.required,
            "description": self.description,
            "access": self.access.value,
        }
