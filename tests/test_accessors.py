"""
Unit tests for the Accessor Resolver

Tests:
- Accessor name parsing and bean decapitalization
- Getter/setter shape recognition
- AccessorsProvider enumeration over the MRO
- Lazy type resolution of candidates
"""

import pytest

from modelprops.accessors import (
    AccessorKind,
    AccessorsProvider,
    decapitalize,
    is_getter,
    is_setter,
    property_name,
    split_accessor_name,
)
from modelprops.exceptions import TypeResolutionError
from modelprops.schema.models import ResolvedType
from tests.sample_models import (
    Account,
    Broken,
    CityInfo,
    Item,
    ItemPage,
    Person,
    Product,
    Widget,
)


def _by_name(accessors):
    return {(a.name, a.kind): a for a in accessors}


# ============================================================================
# TEST: Naming helpers
# ============================================================================


class TestAccessorNames:
    """Tests for accessor name parsing"""

    @pytest.mark.parametrize(
        "method_name, expected",
        [
            ("get_street", ("get", "street")),
            ("is_active", ("is", "active")),
            ("set_zip_code", ("set", "zip_code")),
            ("getFirstName", ("get", "firstName")),
            ("isActive", ("is", "active")),
            ("getURL", ("get", "URL")),
            ("describe", None),
            ("getter", None),
            ("get", None),
        ],
    )
    def test_split_accessor_name(self, method_name, expected):
        assert split_accessor_name(method_name) == expected

    def test_decapitalize(self):
        assert decapitalize("Street") == "street"
        assert decapitalize("URL") == "URL"
        assert decapitalize("X") == "x"
        assert decapitalize("") == ""

    def test_property_name_of_non_accessor(self):
        assert property_name("owner") == "owner"


# ============================================================================
# TEST: Shapes
# ============================================================================


class TestAccessorShapes:
    """Tests for getter/setter shape recognition"""

    def test_getter_shapes(self):
        assert is_getter("getFirstName", Person.getFirstName) is True
        assert is_getter("isActive", Person.isActive) is True
        assert is_getter("describe", Person.describe) is False

    def test_getter_with_arguments_is_not_a_getter(self):
        assert is_getter("get_scaled", Widget.get_scaled) is False

    def test_void_getter_is_not_a_getter(self):
        def get_nothing(self) -> None:
            pass

        assert is_getter("get_nothing", get_nothing) is False

    def test_is_getter_requires_bool(self):
        def is_count(self) -> int:
            return 0

        assert is_getter("is_count", is_count) is False

    def test_setter_shapes(self):
        assert is_setter("setFirstName", Person.setFirstName, Person) is True
        assert is_setter("set_label", Widget.set_label, Widget) is True

    def test_setter_returning_other_type_is_not_a_setter(self):
        def set_value(self, value: int) -> int:
            return value

        assert is_setter("set_value", set_value) is False

    def test_setter_needs_exactly_one_value(self):
        def set_pair(self, left, right) -> None:
            pass

        assert is_setter("set_pair", set_pair) is False


# ============================================================================
# TEST: AccessorsProvider
# ============================================================================


class TestAccessorsProvider:
    """Tests for AccessorsProvider.accessors_of"""

    def test_camel_case_accessors(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Person)))

        assert ("getFirstName", AccessorKind.GETTER) in accessors
        assert ("setFirstName", AccessorKind.SETTER) in accessors
        assert ("isActive", AccessorKind.GETTER) in accessors
        assert ("describe", AccessorKind.GETTER) not in accessors
        assert accessors[("getFirstName", AccessorKind.GETTER)].property_name == "firstName"

    def test_property_objects(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Account)))

        getter = accessors[("owner", AccessorKind.GETTER)]
        setter = accessors[("owner", AccessorKind.SETTER)]
        assert getter.property_backed is True
        assert setter.property_name == "owner"
        assert ("display_name", AccessorKind.GETTER) in accessors

    def test_static_methods_ignored(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Widget)))

        assert ("get_default", AccessorKind.GETTER) not in accessors
        assert ("set_label", AccessorKind.SETTER) in accessors

    def test_subclass_overrides_base(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Product)))

        created = accessors[("get_created", AccessorKind.GETTER)]
        assert created.declaring_type is Product
        assert created.return_type == ResolvedType(int)
        assert ("get_id", AccessorKind.GETTER) in accessors

    def test_non_class_has_no_accessors(self):
        import typing

        resolved = ResolvedType(typing.Union, (ResolvedType(int), ResolvedType(str)))

        assert AccessorsProvider().accessors_of(resolved) == []

    def test_recomputed_on_each_call(self):
        provider = AccessorsProvider()
        first = provider.accessors_of(ResolvedType(CityInfo))
        second = provider.accessors_of(ResolvedType(CityInfo))

        assert first == second
        assert first is not second


# ============================================================================
# TEST: AccessorCandidate types
# ============================================================================


class TestAccessorCandidate:
    """Tests for lazily resolved accessor types"""

    def test_generic_return_type_substituted(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(ItemPage)))

        items = accessors[("get_items", AccessorKind.GETTER)]
        assert items.return_type == ResolvedType.of(list, Item)

    def test_setter_argument_type(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(CityInfo)))

        setter = accessors[("set_zip", AccessorKind.SETTER)]
        assert setter.argument_type(0) == ResolvedType(str)
        assert setter.value_type == ResolvedType(str)

    def test_property_setter_falls_back_to_getter_type(self):
        class Thermostat:
            @property
            def target(self) -> float:
                return 0.0

            @target.setter
            def target(self, value):
                pass

        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Thermostat)))

        assert accessors[("target", AccessorKind.SETTER)].value_type == ResolvedType(float)

    def test_missing_argument_raises_index_error(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(CityInfo)))

        with pytest.raises(IndexError):
            accessors[("get_name", AccessorKind.GETTER)].argument_type(0)

    def test_unresolvable_annotation_faults_lazily(self):
        accessors = _by_name(AccessorsProvider().accessors_of(ResolvedType(Broken)))

        owner = accessors[("get_owner", AccessorKind.GETTER)]
        assert owner.property_name == "owner"
        with pytest.raises(TypeResolutionError):
            owner.return_type
