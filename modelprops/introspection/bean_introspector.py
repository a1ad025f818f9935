"""
Bean Introspector - derives direction-specific property definitions from a class.

Supports:
- Getters/setters (snake_case and camelCase), property and cached_property objects
- Annotated fields (Annotated[T, JsonProperty(...)]) with configurable visibility
- Renaming, ignoring, unwrapping and access restriction via modelprops.annotations
- Class-level ignore lists and naming policies
- Optional alphabetical ordering
"""

import functools
import inspect
import logging
import typing
from dataclasses import dataclass
from typing import Dict, List, Optional

from modelprops.accessors.accessors import is_getter, is_setter, property_name
from modelprops.annotations import Access, ignored_properties_of, marker_of, naming_policy_of
from modelprops.config import MarshalingProfile, Visibility
from modelprops.exceptions import IntrospectionError, ProfileNotConfiguredError
from modelprops.schema.models import Direction, ResolvedType
from modelprops.schema.type_resolver import class_annotations
from .definitions import AnnotatedMember, BeanPropertyDefinition, MemberKind

logger = logging.getLogger(__name__)


@dataclass
class _PropertyBuilder:
    """Members collected for one implicit name"""
    implicit_name: str
    getter: Optional[AnnotatedMember] = None
    setter: Optional[AnnotatedMember] = None
    field: Optional[AnnotatedMember] = None

    def members(self) -> List[AnnotatedMember]:
        return [m for m in (self.getter, self.setter, self.field) if m is not None]

    def ordered_for(self, direction: Direction) -> List[AnnotatedMember]:
        if direction is Direction.SERIALIZATION:
            ordered = (self.getter, self.field, self.setter)
        else:
            ordered = (self.setter, self.field, self.getter)
        return [m for m in ordered if m is not None]


def _is_class_var(annotation) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return typing.get_origin(annotation) is typing.ClassVar


def _implicit_field_name(field_name: str) -> str:
    # "_street" backs the "street" property
    if field_name.startswith("_") and not field_name.startswith("__"):
        return field_name[1:]
    return field_name


class BeanIntrospector:
    """
    Introspects classes into BeanPropertyDefinitions

    Usage:
    ```python
    introspector = BeanIntrospector()
    introspector.set_profile(MarshalingProfile())
    for definition in introspector.introspect(ResolvedType(Address), Direction.SERIALIZATION):
        print(definition.internal_name, definition.name)
    ```
    """

    def __init__(self, profile: Optional[MarshalingProfile] = None):
        self._profile = profile

    def set_profile(self, profile: MarshalingProfile) -> None:
        self._profile = profile

    @property
    def profile(self) -> MarshalingProfile:
        if self._profile is None:
            raise ProfileNotConfiguredError(
                "BeanIntrospector used before a MarshalingProfile was installed"
            )
        return self._profile

    def introspect(self, resolved_type: ResolvedType, direction: Direction) -> List[BeanPropertyDefinition]:
        """
        Property definitions of a type for one direction

        Args:
            resolved_type: Type to introspect
            direction: Serialization or deserialization view

        Returns:
            Definitions with unique internal names, in declaration order
            (alphabetical by name when the profile asks for it)

        Raises:
            IntrospectionError: If the type is not a class
            ProfileNotConfiguredError: If no profile was installed
        """
        profile = self.profile
        erased = resolved_type.erased_type
        if not isinstance(erased, type):
            raise IntrospectionError(f"Cannot introspect {resolved_type.name}: not a class")

        builders = self._collect_members(erased, profile)
        ignored = ignored_properties_of(erased)
        class_policy = naming_policy_of(erased)

        definitions: List[BeanPropertyDefinition] = []
        for implicit_name, builder in builders.items():
            definition = self._build_definition(builder, direction, ignored, class_policy)
            if definition is not None:
                definitions.append(definition)

        if profile.sort_properties_alphabetically:
            definitions.sort(key=lambda d: d.name)

        logger.debug(
            f"Introspected {len(definitions)} {direction.value} properties on {resolved_type.name}"
        )
        return definitions

    def _collect_members(self, erased: type, profile: MarshalingProfile) -> Dict[str, _PropertyBuilder]:
        builders: Dict[str, _PropertyBuilder] = {}

        def builder_for(name: str) -> _PropertyBuilder:
            if name not in builders:
                builders[name] = _PropertyBuilder(name)
            return builders[name]

        for klass in reversed(erased.__mro__):
            if klass is object:
                continue

            for field_name, annotation in class_annotations(klass).items():
                if _is_class_var(annotation):
                    continue
                marker = marker_of(annotation)
                if not self._field_visible(field_name, marker, profile):
                    continue
                builder_for(_implicit_field_name(field_name)).field = AnnotatedMember(
                    name=field_name,
                    kind=MemberKind.FIELD,
                    declaring_type=klass,
                    annotation=annotation,
                    marker=marker,
                )

            for attr_name, attr in vars(klass).items():
                if attr_name.startswith("_"):
                    continue
                self._collect_accessor(klass, attr_name, attr, builder_for)

        return builders

    def _collect_accessor(self, klass: type, attr_name: str, attr, builder_for) -> None:
        if isinstance(attr, property):
            builder = builder_for(attr_name)
            if attr.fget is not None:
                builder.getter = AnnotatedMember(attr_name, MemberKind.GETTER, klass, attr.fget,
                                                 marker=marker_of(attr.fget))
            if attr.fset is not None:
                builder.setter = AnnotatedMember(attr_name, MemberKind.SETTER, klass, attr.fset,
                                                 marker=marker_of(attr.fset))
            return

        if isinstance(attr, functools.cached_property):
            builder_for(attr_name).getter = AnnotatedMember(
                attr_name, MemberKind.GETTER, klass, attr.func, marker=marker_of(attr.func)
            )
            return

        if not inspect.isfunction(attr):
            return

        if is_getter(attr_name, attr):
            builder_for(property_name(attr_name)).getter = AnnotatedMember(
                attr_name, MemberKind.GETTER, klass, attr, marker=marker_of(attr)
            )
        elif is_setter(attr_name, attr, klass):
            builder_for(property_name(attr_name)).setter = AnnotatedMember(
                attr_name, MemberKind.SETTER, klass, attr, marker=marker_of(attr)
            )

    @staticmethod
    def _field_visible(field_name: str, marker, profile: MarshalingProfile) -> bool:
        if marker is not None:
            return True
        if profile.field_visibility is Visibility.ANY:
            return True
        if profile.field_visibility is Visibility.PUBLIC_ONLY:
            return not field_name.startswith("_")
        return False

    def _build_definition(
        self,
        builder: _PropertyBuilder,
        direction: Direction,
        ignored,
        class_policy,
    ) -> Optional[BeanPropertyDefinition]:
        markers = [m.marker for m in builder.ordered_for(direction) if m.marker is not None]

        if any(marker.ignore for marker in markers):
            logger.debug(f"Property '{builder.implicit_name}' ignored by marker")
            return None

        explicit_name = next((marker.name for marker in markers if marker.name), None)
        if builder.implicit_name in ignored or (explicit_name and explicit_name in ignored):
            logger.debug(f"Property '{builder.implicit_name}' ignored by class configuration")
            return None

        access = next((marker.access for marker in markers if marker.access is not Access.AUTO), Access.AUTO)

        if direction is Direction.SERIALIZATION:
            if builder.getter is None and builder.field is None:
                return None
            if access is Access.WRITE_ONLY:
                return None
        else:
            if builder.setter is None and builder.field is None:
                return None
            if access is Access.READ_ONLY:
                return None

        return BeanPropertyDefinition(
            implicit_name=builder.implicit_name,
            direction=direction,
            getter=builder.getter,
            setter=builder.setter,
            field=builder.field,
            explicit_name=explicit_name,
            unwrapped=any(marker.unwrapped for marker in markers),
            required=any(marker.required for marker in markers),
            description=next((marker.description for marker in markers if marker.description), ""),
            access=access,
            naming_policy=class_policy,
        )
