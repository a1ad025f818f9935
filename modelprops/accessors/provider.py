"""Accessors Provider - enumerates getter/setter candidates of a resolved type."""

import functools
import inspect
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from modelprops.schema.models import ResolvedType
from modelprops.schema.type_resolver import TypeResolver
from .accessors import AccessorCandidate, AccessorKind, is_getter, is_setter, property_name

logger = logging.getLogger(__name__)


class AccessorsProvider:
    """
    Finds the accessor methods of a type and its supertypes

    Usage:
    ```python
    provider = AccessorsProvider()
    for accessor in provider.accessors_of(ResolvedType(Address)):
        print(accessor.name, accessor.kind.value, accessor.value_type)
    ```
    """

    def __init__(self, type_resolver: Optional[TypeResolver] = None):
        self.type_resolver = type_resolver or TypeResolver()

    def accessors_of(self, resolved_type: ResolvedType) -> List[AccessorCandidate]:
        """
        Enumerate accessor candidates, recomputed on every call

        Subclass members replace base members with the same name.

        Args:
            resolved_type: Type to inspect

        Returns:
            Getter and setter candidates in declaration order, base classes first
        """
        erased = resolved_type.erased_type
        if not isinstance(erased, type):
            return []

        bindings = tuple(self.type_resolver.type_bindings(resolved_type).items())
        found: Dict[Tuple[str, AccessorKind], AccessorCandidate] = {}

        for klass in reversed(erased.__mro__):
            if klass is object:
                continue
            for name, attr in vars(klass).items():
                if name.startswith("_"):
                    continue
                for kind in AccessorKind:
                    found.pop((name, kind), None)
                for candidate in self._candidates(klass, name, attr, bindings):
                    found[(candidate.name, candidate.kind)] = candidate

        logger.debug(f"Found {len(found)} accessors on {resolved_type.name}")
        return list(found.values())

    def _candidates(
        self,
        klass: type,
        name: str,
        attr: Any,
        bindings: tuple,
    ) -> Iterator[AccessorCandidate]:
        if isinstance(attr, (staticmethod, classmethod)):
            return

        if isinstance(attr, property):
            if attr.fget is not None:
                yield self._candidate(klass, name, AccessorKind.GETTER, attr.fget, name, True, bindings)
            if attr.fset is not None:
                yield self._candidate(
                    klass, name, AccessorKind.SETTER, attr.fset, name, True, bindings, companion=attr.fget
                )
            return

        if isinstance(attr, functools.cached_property):
            yield self._candidate(klass, name, AccessorKind.GETTER, attr.func, name, True, bindings)
            return

        if not inspect.isfunction(attr):
            return

        if is_getter(name, attr):
            yield self._candidate(klass, name, AccessorKind.GETTER, attr, property_name(name), False, bindings)
        elif is_setter(name, attr, klass):
            yield self._candidate(klass, name, AccessorKind.SETTER, attr, property_name(name), False, bindings)

    def _candidate(self, klass, name, kind, func, logical_name, property_backed, bindings, companion=None):
        return AccessorCandidate(
            name=name,
            declaring_type=klass,
            kind=kind,
            raw_member=func,
            property_name=logical_name,
            property_backed=property_backed,
            bindings=bindings,
            companion=companion,
            type_resolver=self.type_resolver,
        )
