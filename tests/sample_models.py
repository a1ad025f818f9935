"""Sample classes shared by the test suite."""
from functools import cached_property
from typing import Annotated, Generic, List, Optional, TypeVar

from modelprops.annotations import (
    Access,
    JsonProperty,
    json_ignore,
    json_ignore_properties,
    json_naming,
    json_property,
    json_unwrapped,
)
from modelprops.naming.policy import NamingPolicy

T = TypeVar("T")


class CityInfo:
    def get_name(self) -> str:
        return "Porto Alegre"

    def set_name(self, name: str) -> None:
        pass

    def get_zip(self) -> str:
        return "90000-000"

    def set_zip(self, zip: str) -> None:
        pass


class Address:
    def get_street(self) -> str:
        return "Rua A"

    def set_street(self, street: str) -> None:
        pass

    @json_unwrapped
    def get_city(self) -> CityInfo:
        return CityInfo()

    def set_city(self, city: CityInfo) -> None:
        pass


class Person:
    """Bean-style camelCase accessors"""

    def getFirstName(self) -> str:
        return ""

    def setFirstName(self, value: str) -> None:
        pass

    def isActive(self) -> bool:
        return True

    def getAge(self) -> int:
        return 0

    def setPassword(self, value: str) -> None:
        pass

    def getURL(self) -> str:
        return ""

    def describe(self) -> str:
        return "not an accessor"


@json_ignore_properties("internal_id")
class Account:
    _owner: str

    @property
    @json_property("accountOwner", required=True, description="Legal owner")
    def owner(self) -> str:
        return self._owner

    @owner.setter
    def owner(self, value: str) -> None:
        self._owner = value

    @property
    def internal_id(self) -> int:
        return 1

    @property
    @json_ignore
    def secret(self) -> str:
        return "hunter2"

    @property
    @json_property(access=Access.READ_ONLY)
    def balance(self) -> float:
        return 0.0

    @balance.setter
    def balance(self, value: float) -> None:
        pass

    @cached_property
    def display_name(self) -> str:
        return "Account"


class Widget:
    def get_label(self) -> str:
        return ""

    def set_label(self, label: str) -> "Widget":
        return self

    @staticmethod
    def get_default() -> str:
        return ""

    def get_scaled(self, factor: int) -> int:
        return factor


class Item:
    def get_sku(self) -> str:
        return ""


class Page(Generic[T]):
    def get_items(self) -> List[T]:
        return []

    def get_total(self) -> int:
        return 0


class ItemPage(Page[Item]):
    pass


class Envelope(Generic[T]):
    @json_unwrapped
    def get_payload(self) -> T:
        raise NotImplementedError

    def get_version(self) -> int:
        return 1


class Node:
    def get_label(self) -> str:
        return ""

    def set_label(self, label: str) -> None:
        pass

    @json_unwrapped
    def get_next(self) -> "Node":
        return self

    @json_unwrapped
    def set_next(self, node: "Node") -> None:
        pass


class Broken:
    def get_name(self) -> str:
        return ""

    def set_name(self, name: str) -> None:
        pass

    def get_owner(self) -> "UndefinedOwner":  # noqa: F821
        return None

    def set_owner(self, owner: "UndefinedOwner") -> None:  # noqa: F821
        pass

    def get_size(self) -> int:
        return 0

    def set_size(self, size: int) -> None:
        pass


@json_naming(NamingPolicy.KEBAB_CASE)
class Shipment:
    def get_tracking_number(self) -> str:
        return ""

    def get_carrier_name(self) -> str:
        return ""


class Tagged:
    label: str = ""

    def get_color(self) -> str:
        return "red"


class Customer:
    def get_email(self) -> Optional[str]:
        return None

    @json_unwrapped
    def get_address(self) -> Optional[Address]:
        return None


class Profile:
    nickname: Annotated[str, JsonProperty("nick")] = ""

    def get_nickname(self) -> str:
        return self.nickname


class BaseEntity:
    def get_id(self) -> int:
        return 0

    def get_created(self) -> str:
        return ""


class Product(BaseEntity):
    def get_created(self) -> int:
        return 0

    def get_title(self) -> str:
        return ""


class Growing(Generic[T]):
    """Each unwrap nests the type argument one level deeper"""

    @json_unwrapped
    def get_inner(self) -> "Growing[List[T]]":
        raise NotImplementedError
