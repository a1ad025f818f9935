"""
Marshaling configuration markers.

Classes opt into renaming, exclusion and unwrapping with these markers; the
BeanIntrospector reads them back when it builds property definitions.

Usage:
```python
@json_ignore_properties("internal_id")
class Address:
    def get_street(self) -> str: ...

    @json_unwrapped
    def get_city(self) -> CityInfo: ...

    @json_property("postCode", required=True)
    def get_zip(self) -> str: ...

    note: Annotated[str, JsonProperty(access=Access.READ_ONLY)] = ""
```
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, FrozenSet, Optional

__all__ = [
    "Access",
    "JsonProperty",
    "json_property",
    "json_unwrapped",
    "json_ignore",
    "json_ignore_properties",
    "json_naming",
    "marker_of",
    "ignored_properties_of",
    "naming_policy_of",
]

MARKER_ATTR = "__json_property__"
IGNORED_ATTR = "__json_ignore_properties__"
NAMING_ATTR = "__json_naming__"


class Access(str, Enum):
    """Which directions a property takes part in"""
    AUTO = "auto"
    READ_ONLY = "read_only"    # serialized only
    WRITE_ONLY = "write_only"  # deserialized only
    READ_WRITE = "read_write"


@dataclass(frozen=True)
class JsonProperty:
    """Marker carried by a getter, setter or field annotation"""
    name: Optional[str] = None
    unwrapped: bool = False
    ignore: bool = False
    required: bool = False
    description: str = ""
    access: Access = Access.AUTO


def _target_function(target: Any) -> Callable:
    # property objects take no attributes; mark the getter (or setter) instead
    if isinstance(target, property):
        return target.fget or target.fset
    return target


def _merge_marker(target: Any, **changes) -> Any:
    func = _target_function(target)
    existing = getattr(func, MARKER_ATTR, None) or JsonProperty()
    setattr(func, MARKER_ATTR, dataclasses.replace(existing, **changes))
    return target


def json_property(
    name: Optional[str] = None,
    *,
    required: Optional[bool] = None,
    description: Optional[str] = None,
    access: Optional[Access] = None,
):
    """
    Rename a property and/or document it. Usable on getters, setters and properties.

    Only the settings passed are written, so stacked decorators accumulate.
    """
    def decorator(target):
        given = {"name": name, "required": required, "description": description, "access": access}
        changes = {key: value for key, value in given.items() if value is not None}
        return _merge_marker(target, **changes)
    return decorator


def json_unwrapped(target):
    """Inline the properties of this member's value type into the owner."""
    return _merge_marker(target, unwrapped=True)


def json_ignore(target):
    """Drop the whole property this member belongs to."""
    return _merge_marker(target, ignore=True)


def json_ignore_properties(*names: str):
    """Class decorator: drop properties by internal or external name."""
    def decorator(cls):
        inherited = getattr(cls, IGNORED_ATTR, frozenset())
        setattr(cls, IGNORED_ATTR, frozenset(inherited) | frozenset(names))
        return cls
    return decorator


def json_naming(policy):
    """Class decorator: naming policy for this class's implicitly named properties."""
    def decorator(cls):
        setattr(cls, NAMING_ATTR, policy)
        return cls
    return decorator


def marker_of(member: Any) -> Optional[JsonProperty]:
    """
    Read the marker of a function, property or annotation

    Annotated[...] annotations contribute the first JsonProperty in their metadata.
    """
    if member is None:
        return None
    metadata = getattr(member, "__metadata__", None)
    if metadata is not None:
        for item in metadata:
            if isinstance(item, JsonProperty):
                return item
        return None
    return getattr(_target_function(member), MARKER_ATTR, None)


def ignored_properties_of(cls: type) -> FrozenSet[str]:
    return frozenset(getattr(cls, IGNORED_ATTR, frozenset()))


def naming_policy_of(cls: type):
    return getattr(cls, NAMING_ATTR, None)
