"""Alternate types - substitute a documented type for the declared one."""

import types
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from modelprops.schema.models import ResolvedType

NONE_TYPE = type(None)


def non_optional(resolved_type: ResolvedType) -> ResolvedType:
    """Optional[X] -> X; anything else is returned unchanged"""
    if resolved_type.erased_type not in (Union, types.UnionType):
        return resolved_type
    members = [p for p in resolved_type.type_parameters if p.erased_type is not NONE_TYPE]
    if len(members) == 1 and len(members) < len(resolved_type.type_parameters):
        return members[0]
    return resolved_type


@dataclass(frozen=True)
class AlternateTypeRule:
    """
    Replace one type with another in documentation

    ``original`` given as a class matches any parameterization of it; given
    as a ResolvedType it must match exactly.
    """
    original: Any
    alternate: Any

    def applies_to(self, resolved_type: ResolvedType) -> bool:
        if isinstance(self.original, ResolvedType):
            return resolved_type == self.original
        return resolved_type.erased_type is self.original

    def alternate_for(self, resolved_type: ResolvedType) -> ResolvedType:
        if isinstance(self.alternate, ResolvedType):
            return self.alternate
        return ResolvedType(self.alternate)


class OptionalUnwrapRule:
    """Documents Optional[X] as X"""

    def applies_to(self, resolved_type: ResolvedType) -> bool:
        return non_optional(resolved_type) is not resolved_type

    def alternate_for(self, resolved_type: ResolvedType) -> ResolvedType:
        return non_optional(resolved_type)

    def __eq__(self, other) -> bool:
        return isinstance(other, OptionalUnwrapRule)

    def __hash__(self) -> int:
        return hash(OptionalUnwrapRule)


def default_rules() -> List[Any]:
    return [OptionalUnwrapRule()]


class AlternateTypeProvider:
    """Applies the first matching rule to a resolved type"""

    def __init__(self, rules: Optional[Iterable[Any]] = None):
        self.rules = list(rules) if rules is not None else default_rules()

    def add_rule(self, rule: Any) -> None:
        self.rules.append(rule)

    def alternate_for(self, resolved_type: ResolvedType) -> ResolvedType:
        for rule in self.rules:
            if rule.applies_to(resolved_type):
                return rule.alternate_for(resolved_type)
        return resolved_type
