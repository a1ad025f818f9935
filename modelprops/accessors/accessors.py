"""
Accessor shapes - getter/setter recognition and logical property names.

Supports:
- snake_case accessors (get_street, is_active, set_street)
- bean-style camelCase accessors (getStreet, isActive, setStreet)
- builder setters returning the declaring class
- property / cached_property objects
"""

import inspect
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple, TypeVar

from modelprops.schema.models import ResolvedType
from modelprops.schema.type_resolver import TypeResolver, evaluated_hints

_SNAKE_ACCESSOR_RE = re.compile(r"^(?P<prefix>get|is|set)_(?P<name>[A-Za-z0-9_]+)$")
_CAMEL_ACCESSOR_RE = re.compile(r"^(?P<prefix>get|is|set)(?P<name>[A-Z][A-Za-z0-9_]*)$")

GETTER_PREFIXES = ("get", "is")
SETTER_PREFIXES = ("set",)


class AccessorKind(str, Enum):
    """Shape of an accessor method"""
    GETTER = "getter"
    SETTER = "setter"


def split_accessor_name(method_name: str) -> Optional[Tuple[str, str]]:
    """
    Split an accessor name into (prefix, logical name)

    Returns:
        ("get", "street") for get_street / getStreet, None if not accessor-shaped
    """
    match = _SNAKE_ACCESSOR_RE.match(method_name)
    if match:
        return match.group("prefix"), match.group("name")
    match = _CAMEL_ACCESSOR_RE.match(method_name)
    if match:
        return match.group("prefix"), decapitalize(match.group("name"))
    return None


def decapitalize(name: str) -> str:
    """Bean rule: "Street" -> "street", but "URL" stays "URL"."""
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def property_name(method_name: str) -> str:
    """Logical property name of an accessor; non-accessor names map to themselves."""
    parts = split_accessor_name(method_name)
    return parts[1] if parts else method_name


def _is_void(annotation: Any) -> bool:
    return annotation is None or annotation is type(None) or annotation == "None"


def _parameters(func: Callable) -> list:
    try:
        return list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return []


def _return_annotation(func: Callable) -> Any:
    try:
        return inspect.signature(func).return_annotation
    except (TypeError, ValueError):
        return inspect.Signature.empty


def is_getter(method_name: str, func: Callable) -> bool:
    """get_x / is_x taking only self and returning something"""
    parts = split_accessor_name(method_name)
    if parts is None or parts[0] not in GETTER_PREFIXES:
        return False
    if len(_parameters(func)) != 1:
        return False
    returned = _return_annotation(func)
    if _is_void(returned):
        return False
    if parts[0] == "is":
        return returned is inspect.Signature.empty or returned is bool or returned == "bool"
    return True


def is_setter(method_name: str, func: Callable, declaring_type: Optional[type] = None) -> bool:
    """set_x taking self and one value, returning nothing or the declaring class"""
    parts = split_accessor_name(method_name)
    if parts is None or parts[0] not in SETTER_PREFIXES:
        return False
    params = _parameters(func)
    if len(params) != 2:
        return False
    if params[1].kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
        return False
    returned = _return_annotation(func)
    if returned is inspect.Signature.empty or _is_void(returned):
        return True
    # builder-style setters
    if declaring_type is not None and (returned is declaring_type or returned == declaring_type.__name__):
        return True
    return returned == "Self" or getattr(returned, "_name", None) == "Self"


@dataclass(frozen=True)
class AccessorCandidate:
    """
    A getter or setter backing a logical property.

    Types are resolved lazily so that one badly annotated accessor only
    faults the property it backs.
    """

    name: str
    declaring_type: type
    kind: AccessorKind
    raw_member: Callable = field(repr=False)
    property_name: str = ""
    property_backed: bool = False
    bindings: Tuple[Tuple[TypeVar, ResolvedType], ...] = field(default=(), repr=False)
    companion: Optional[Callable] = field(default=None, repr=False)  # fget of a property setter
    type_resolver: TypeResolver = field(default_factory=TypeResolver, compare=False, repr=False)

    @property
    def is_getter(self) -> bool:
        return self.kind is AccessorKind.GETTER

    @property
    def is_setter(self) -> bool:
        return self.kind is AccessorKind.SETTER

    @property
    def return_type(self) -> ResolvedType:
        hints = evaluated_hints(self.raw_member)
        return self.type_resolver.resolve(hints.get("return", Any), dict(self.bindings))

    def argument_type(self, index: int) -> ResolvedType:
        """
        Resolved type of the index-th argument after self

        Raises:
            IndexError: If the accessor takes fewer arguments
        """
        names = [p.name for p in _parameters(self.raw_member)][1:]
        arg_name = names[index]
        hints = evaluated_hints(self.raw_member)
        if arg_name in hints:
            annotation = hints[arg_name]
        elif self.companion is not None:
            annotation = evaluated_hints(self.companion).get("return", Any)
        else:
            annotation = Any
        return self.type_resolver.resolve(annotation, dict(self.bindings))

    @property
    def value_type(self) -> ResolvedType:
        """Return type of a getter, argument type of a setter"""
        return self.return_type if self.is_getter else self.argument_type(0)

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"

    def __str__(self) -> str:
        return f"AccessorCandidate({self.qualified_name} [{self.kind.value}] -> {self.property_name})"
