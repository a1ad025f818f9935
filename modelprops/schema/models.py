"""Core data models shared across modelprops: resolved types and directions."""
import types
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


class Direction(str, Enum):
    """Marshaling direction a property set is resolved for."""
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"

    @property
    def is_serialization(self) -> bool:
        return self is Direction.SERIALIZATION


@dataclass(frozen=True)
class ResolvedType:
    """
    An already-generics-resolved type: the erased class plus its parameters.

    ``ResolvedType(list, (ResolvedType(str),))`` stands for ``List[str]``.
    Instances are immutable and hashable so they can be compared by value.
    """

    erased_type: Any
    type_parameters: Tuple["ResolvedType", ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, erased_type: Any, *type_parameters: Any) -> "ResolvedType":
        """Build a ResolvedType from a class and (classes or ResolvedTypes) parameters."""
        params = tuple(
            p if isinstance(p, ResolvedType) else ResolvedType(p)
            for p in type_parameters
        )
        return cls(erased_type, params)

    @property
    def simple_name(self) -> str:
        erased = self.erased_type
        if erased is Union or erased is types.UnionType:
            return "Union"
        if isinstance(erased, type):
            return erased.__name__
        return getattr(erased, "_name", None) or str(erased)

    @property
    def name(self) -> str:
        """Readable name, e.g. ``List[str]`` or ``Page[Item]``."""
        if not self.type_parameters:
            return self.simple_name
        params = ", ".join(p.name for p in self.type_parameters)
        return f"{self.simple_name}[{params}]"

    @property
    def qualified_name(self) -> str:
        erased = self.erased_type
        module = getattr(erased, "__module__", "")
        if isinstance(erased, type) and module and module != "builtins":
            return f"{module}.{self.name}"
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            "name": self.name,
            "qualified_name": self.qualified_name,
            "type_parameters": [p.to_dict() for p in self.type_parameters],
        }

    def __str__(self) -> str:
        return self.name
