"""
Unit tests for the Property Introspector

Tests:
- BeanIntrospector: member discovery per direction
- Marker handling: renaming, ignoring, access, unwrapping, field markers
- Profile handling: field visibility, ordering, missing profile
- BeanPropertyDefinition: primary member selection
"""

import pytest

from modelprops.annotations import Access, JsonProperty, json_property, marker_of
from modelprops.config import MarshalingProfile, Visibility
from modelprops.exceptions import IntrospectionError, ProfileNotConfiguredError
from modelprops.introspection import BeanIntrospector, BeanPropertyDefinition, MemberKind
from modelprops.schema.models import Direction, ResolvedType
from tests.sample_models import (
    Account,
    Address,
    Person,
    Profile,
    Shipment,
    Tagged,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def introspector():
    """Introspector with the default profile"""
    return BeanIntrospector(MarshalingProfile())


def _definitions(introspector, cls, direction):
    return {d.internal_name: d for d in introspector.introspect(ResolvedType(cls), direction)}


# ============================================================================
# TEST: Member discovery
# ============================================================================


class TestBeanIntrospector:
    """Tests for BeanIntrospector.introspect"""

    def test_serialization_view(self, introspector):
        definitions = _definitions(introspector, Person, Direction.SERIALIZATION)

        assert set(definitions) == {"firstName", "active", "age", "URL"}

    def test_deserialization_view(self, introspector):
        definitions = _definitions(introspector, Person, Direction.DESERIALIZATION)

        assert set(definitions) == {"firstName", "password"}

    def test_declaration_order(self, introspector):
        definitions = introspector.introspect(ResolvedType(Address), Direction.SERIALIZATION)

        assert [d.internal_name for d in definitions] == ["street", "city"]

    def test_primary_member_per_direction(self, introspector):
        ser = _definitions(introspector, Address, Direction.SERIALIZATION)["street"]
        deser = _definitions(introspector, Address, Direction.DESERIALIZATION)["street"]

        assert ser.primary_member().name == "get_street"
        assert ser.primary_member().kind is MemberKind.GETTER
        assert deser.primary_member().name == "set_street"
        assert deser.primary_member().kind is MemberKind.SETTER

    def test_unwrapped_marker_merged_across_members(self, introspector):
        deser = _definitions(introspector, Address, Direction.DESERIALIZATION)["city"]

        # only the getter carries the marker
        assert deser.primary_member().name == "set_city"
        assert deser.is_unwrapped() is True

    def test_non_class_raises(self, introspector):
        with pytest.raises(IntrospectionError):
            introspector.introspect(ResolvedType(len), Direction.SERIALIZATION)

    def test_missing_profile_raises(self):
        with pytest.raises(ProfileNotConfiguredError):
            BeanIntrospector().introspect(ResolvedType(Person), Direction.SERIALIZATION)


# ============================================================================
# TEST: Markers
# ============================================================================


class TestMarkers:
    """Tests for marker-driven configuration"""

    def test_explicit_name_and_documentation(self, introspector):
        owner = _definitions(introspector, Account, Direction.SERIALIZATION)["owner"]

        assert owner.name == "accountOwner"
        assert owner.has_explicit_name is True
        assert owner.required is True
        assert owner.description == "Legal owner"

    def test_ignored_properties(self, introspector):
        definitions = _definitions(introspector, Account, Direction.SERIALIZATION)

        assert "secret" not in definitions
        assert "internal_id" not in definitions

    def test_read_only_access(self, introspector):
        ser = _definitions(introspector, Account, Direction.SERIALIZATION)
        deser = _definitions(introspector, Account, Direction.DESERIALIZATION)

        assert ser["balance"].access is Access.READ_ONLY
        assert "balance" not in deser

    def test_write_only_access(self, introspector):
        class Login:
            def get_password(self) -> str:
                return ""

            @json_property(access=Access.WRITE_ONLY)
            def set_password(self, value: str) -> None:
                pass

        assert _definitions(introspector, Login, Direction.SERIALIZATION) == {}
        assert set(_definitions(introspector, Login, Direction.DESERIALIZATION)) == {"password"}

    def test_cached_property_is_read_only(self, introspector):
        assert "display_name" in _definitions(introspector, Account, Direction.SERIALIZATION)
        assert "display_name" not in _definitions(introspector, Account, Direction.DESERIALIZATION)

    def test_field_marker_renames(self, introspector):
        nickname = _definitions(introspector, Profile, Direction.SERIALIZATION)["nickname"]

        assert nickname.name == "nick"
        assert nickname.primary_member().name == "get_nickname"
        assert nickname.field.kind is MemberKind.FIELD

    def test_class_naming_policy_recorded(self, introspector):
        from modelprops.naming.policy import NamingPolicy

        definition = _definitions(introspector, Shipment, Direction.SERIALIZATION)["tracking_number"]

        assert definition.naming_policy is NamingPolicy.KEBAB_CASE

    def test_stacked_markers_accumulate(self, introspector):
        class Gadget:
            @json_property("label")
            @json_property(required=True, description="Shown on the box")
            def get_title(self) -> str:
                return ""

            @json_property("dimension")
            @property
            @json_property(access=Access.READ_ONLY)
            def size(self) -> int:
                return 0

        assert marker_of(Gadget.get_title) == JsonProperty(
            name="label", required=True, description="Shown on the box"
        )
        definitions = _definitions(introspector, Gadget, Direction.SERIALIZATION)
        assert definitions["title"].name == "label"
        assert definitions["title"].required is True
        assert definitions["size"].name == "dimension"
        assert definitions["size"].access is Access.READ_ONLY

    def test_marker_of_annotation(self):
        from typing import Annotated

        assert marker_of(Annotated[str, "doc", JsonProperty("x")]) == JsonProperty("x")
        assert marker_of(Annotated[str, "doc"]) is None
        assert marker_of(None) is None


# ============================================================================
# TEST: Profile handling
# ============================================================================


class TestProfileHandling:
    """Tests for MarshalingProfile driven behavior"""

    def test_public_field_is_a_member(self, introspector):
        label = _definitions(introspector, Tagged, Direction.SERIALIZATION)["label"]

        assert label.primary_member().kind is MemberKind.FIELD

    def test_field_visibility_none(self):
        introspector = BeanIntrospector(MarshalingProfile(field_visibility=Visibility.NONE))

        assert "label" not in _definitions(introspector, Tagged, Direction.SERIALIZATION)

    def test_field_visibility_any_links_private_field(self):
        introspector = BeanIntrospector(MarshalingProfile(field_visibility=Visibility.ANY))

        owner = _definitions(introspector, Account, Direction.SERIALIZATION)["owner"]

        assert owner.field is not None
        assert owner.field.name == "_owner"

    def test_alphabetical_order(self):
        introspector = BeanIntrospector(MarshalingProfile(sort_properties_alphabetically=True))

        definitions = introspector.introspect(ResolvedType(Person), Direction.SERIALIZATION)

        assert [d.name for d in definitions] == sorted(d.name for d in definitions)

    def test_unparsable_field_annotation_falls_back_to_raw(self, introspector):
        class Legacy:
            code: "not a valid (expression"

            def get_name(self) -> str:
                return ""

        definitions = _definitions(introspector, Legacy, Direction.SERIALIZATION)

        assert set(definitions) == {"code", "name"}
        assert definitions["code"].field.annotation == "not a valid (expression"

    def test_set_profile(self):
        introspector = BeanIntrospector()
        introspector.set_profile(MarshalingProfile())

        assert introspector.profile == MarshalingProfile()


# ============================================================================
# TEST: BeanPropertyDefinition
# ============================================================================


class TestBeanPropertyDefinition:
    """Tests for BeanPropertyDefinition"""

    def test_field_only_definition_has_field_primary(self):
        from modelprops.introspection import AnnotatedMember

        field = AnnotatedMember("label", MemberKind.FIELD, Tagged, annotation=str)
        definition = BeanPropertyDefinition("label", Direction.DESERIALIZATION, field=field)

        assert definition.primary_member() is field
        assert definition.primary_member().is_method is False
        assert definition.name == "label"

    def test_to_dict(self, introspector):
        owner = _definitions(introspector, Account, Direction.SERIALIZATION)["owner"]
        data = owner.to_dict()

        assert data["name"] == "accountOwner"
        assert data["internal_name"] == "owner"
        assert data["primary_member"] == "owner"
        assert data["direction"] == "serialization"
