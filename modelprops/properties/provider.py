"""
Bean Model Property Provider - resolves the documented properties of a type.

Joins the introspector's property definitions to accessor methods, decides
whether each property is emitted directly or unwrapped, and recursively
expands unwrapped properties into a flat, direction-specific list.

Supports:
- Serialization and deserialization views
- Unwrap flattening with a cycle guard
- Per-property fault isolation on the deserialization path
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from modelprops.accessors.accessors import AccessorCandidate
from modelprops.accessors.provider import AccessorsProvider
from modelprops.config import MarshalingProfile
from modelprops.exceptions import CyclicUnwrapError, ProfileNotConfiguredError
from modelprops.introspection.bean_introspector import BeanIntrospector
from modelprops.introspection.definitions import AnnotatedMember, PropertyDefinition
from modelprops.naming.strategy import BeanPropertyNamingStrategy, ProfileNamingStrategy
from modelprops.schema.models import Direction, ResolvedType
from .alternates import AlternateTypeProvider, non_optional
from .model_property import BeanModelProperty

logger = logging.getLogger(__name__)

# Nesting limit for unwrap chains whose parameterization keeps growing
MAX_UNWRAP_DEPTH = 32


class ModelPropertiesProvider(ABC):
    """Source of documented properties for a type"""

    @abstractmethod
    def properties_for_serialization(self, resolved_type: ResolvedType) -> List[BeanModelProperty]:
        ...

    @abstractmethod
    def properties_for_deserialization(self, resolved_type: ResolvedType) -> List[BeanModelProperty]:
        ...

    @abstractmethod
    def set_profile(self, profile: MarshalingProfile) -> None:
        ...


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of resolving one property definition"""
    internal_name: str
    status: ResolutionStatus
    properties: Tuple[BeanModelProperty, ...] = ()
    reason: str = ""

    @classmethod
    def resolved(cls, internal_name: str, properties: Iterable[BeanModelProperty]) -> "ResolutionOutcome":
        return cls(internal_name, ResolutionStatus.RESOLVED, tuple(properties))

    @classmethod
    def skipped(cls, internal_name: str, reason: str) -> "ResolutionOutcome":
        return cls(internal_name, ResolutionStatus.SKIPPED, reason=reason)

    @classmethod
    def failed(cls, internal_name: str, reason: str) -> "ResolutionOutcome":
        return cls(internal_name, ResolutionStatus.FAILED, reason=reason)


def index_by_internal_name(definitions: Iterable[PropertyDefinition]) -> Dict[str, PropertyDefinition]:
    """
    One definition per internal name

    On collision the last definition wins and keeps the position of the first.
    """
    lookup: Dict[str, PropertyDefinition] = {}
    for definition in definitions:
        if definition.internal_name in lookup:
            logger.debug(f"Duplicate internal name '{definition.internal_name}', keeping the last definition")
        lookup[definition.internal_name] = definition
    return lookup


class BeanModelPropertyProvider(ModelPropertiesProvider):
    """
    Resolves documented properties of plain Python classes

    Usage:
    ```python
    provider = build_provider(MarshalingProfile(naming_policy=NamingPolicy.SNAKE_CASE))
    for prop in provider.properties_for_serialization(ResolvedType(Address)):
        print(prop.name, prop.type_name)
    ```
    """

    def __init__(
        self,
        accessors: AccessorsProvider,
        alternate_type_provider: AlternateTypeProvider,
        naming_strategy: BeanPropertyNamingStrategy,
        introspector: Optional[BeanIntrospector] = None,
    ):
        self.accessors = accessors
        self.alternate_type_provider = alternate_type_provider
        self.naming_strategy = naming_strategy
        self.introspector = introspector or BeanIntrospector()
        self._profile: Optional[MarshalingProfile] = None

    def set_profile(self, profile: MarshalingProfile) -> None:
        """Install the active marshaling profile on the introspector and naming strategy"""
        self._profile = profile
        self.introspector.set_profile(profile)
        self.naming_strategy.set_profile(profile)

    @property
    def profile(self) -> Optional[MarshalingProfile]:
        return self._profile

    def _require_profile(self) -> MarshalingProfile:
        if self._profile is None:
            raise ProfileNotConfiguredError("set_profile() must be called before resolving properties")
        return self._profile

    # ── Public entry points ──────────────────────────────────────────────────

    def properties_for_serialization(self, resolved_type: ResolvedType) -> List[BeanModelProperty]:
        """
        Properties written when the type is serialized

        Faults propagate to the caller.
        """
        properties = self._properties(resolved_type, Direction.SERIALIZATION, ())
        logger.info(f"Resolved {len(properties)} serialization properties for {resolved_type.name}")
        return properties

    def properties_for_deserialization(self, resolved_type: ResolvedType) -> List[BeanModelProperty]:
        """
        Properties read when the type is deserialized

        A fault on one property is logged and that property skipped.
        """
        properties = self._properties(resolved_type, Direction.DESERIALIZATION, ())
        logger.info(f"Resolved {len(properties)} deserialization properties for {resolved_type.name}")
        return properties

    def resolve_outcomes(self, resolved_type: ResolvedType, direction: Direction) -> List[ResolutionOutcome]:
        """Per-definition outcomes of the top-level type, without logging faults"""
        return self._outcomes(resolved_type, direction, ())

    # ── Resolution ───────────────────────────────────────────────────────────

    def _properties(
        self,
        resolved_type: ResolvedType,
        direction: Direction,
        expanding: Tuple[ResolvedType, ...],
    ) -> List[BeanModelProperty]:
        properties: List[BeanModelProperty] = []
        for outcome in self._outcomes(resolved_type, direction, expanding):
            if outcome.status is ResolutionStatus.FAILED:
                logger.warning(
                    f"Skipping {direction.value} property '{outcome.internal_name}' "
                    f"of {resolved_type.name}: {outcome.reason}"
                )
            properties.extend(outcome.properties)
        return properties

    def _outcomes(
        self,
        resolved_type: ResolvedType,
        direction: Direction,
        expanding: Tuple[ResolvedType, ...],
    ) -> List[ResolutionOutcome]:
        self._require_profile()

        if resolved_type in expanding or len(expanding) >= MAX_UNWRAP_DEPTH:
            raise CyclicUnwrapError(resolved_type.name, tuple(t.name for t in expanding))
        expanding = expanding + (resolved_type,)

        property_lookup = index_by_internal_name(self.introspector.introspect(resolved_type, direction))
        accessors = self.accessors.accessors_of(resolved_type)

        outcomes: List[ResolutionOutcome] = []
        for internal_name, definition in property_lookup.items():
            if direction is Direction.DESERIALIZATION:
                outcome = self._isolated_outcome(internal_name, definition, accessors, direction, expanding)
            else:
                outcome = self._outcome(internal_name, definition, accessors, direction, expanding)
            outcomes.append(outcome)
        return outcomes

    def _isolated_outcome(self, internal_name, definition, accessors, direction, expanding) -> ResolutionOutcome:
        try:
            return self._outcome(internal_name, definition, accessors, direction, expanding)
        except ProfileNotConfiguredError:
            raise
        except Exception as e:
            return ResolutionOutcome.failed(internal_name, f"{type(e).__name__}: {e}")

    def _outcome(
        self,
        internal_name: str,
        definition: PropertyDefinition,
        accessors: Sequence[AccessorCandidate],
        direction: Direction,
        expanding: Tuple[ResolvedType, ...],
    ) -> ResolutionOutcome:
        member = definition.primary_member()
        accessor = self._find_accessor(accessors, internal_name, member)
        if accessor is None:
            logger.debug(f"No accessor for '{internal_name}' on {expanding[-1].name}")
            return ResolutionOutcome.skipped(internal_name, "no matching accessor")

        if member.is_method and definition.is_unwrapped():
            return ResolutionOutcome.resolved(
                internal_name,
                self._unwrapped_properties(member, accessor, direction, expanding),
            )

        name = self.naming_strategy.resolve_name(definition, direction)
        model_property = BeanModelProperty.create(
            name, definition, accessor, direction, self.alternate_type_provider
        )
        return ResolutionOutcome.resolved(internal_name, [model_property])

    def _unwrapped_properties(
        self,
        member: AnnotatedMember,
        accessor: AccessorCandidate,
        direction: Direction,
        expanding: Tuple[ResolvedType, ...],
    ) -> List[BeanModelProperty]:
        if member.is_getter:
            nested_type = accessor.return_type
        else:
            nested_type = accessor.argument_type(0)
        nested_type = non_optional(nested_type)
        logger.debug(f"Unwrapping {accessor.qualified_name} into {nested_type.name}")
        return self._properties(nested_type, direction, expanding)

    @staticmethod
    def _find_accessor(
        accessors: Sequence[AccessorCandidate],
        internal_name: str,
        member: Optional[AnnotatedMember],
    ) -> Optional[AccessorCandidate]:
        method_name = member.name if member is not None else ""
        for accessor in accessors:
            if accessor.name != method_name or accessor.property_name != internal_name:
                continue
            # property getters and setters share one name
            if accessor.property_backed and accessor.is_getter != member.is_getter:
                continue
            return accessor
        return None


def build_provider(profile: Optional[MarshalingProfile] = None) -> BeanModelPropertyProvider:
    """Wire a provider with the default collaborators and install the profile"""
    provider = BeanModelPropertyProvider(
        accessors=AccessorsProvider(),
        alternate_type_provider=AlternateTypeProvider(),
        naming_strategy=ProfileNamingStrategy(),
        introspector=BeanIntrospector(),
    )
    provider.set_profile(profile or MarshalingProfile())
    return provider
