"""Naming strategies - map a property definition and direction to its wire name."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from modelprops.exceptions import ProfileNotConfiguredError
from modelprops.schema.models import Direction

if TYPE_CHECKING:
    from modelprops.config import MarshalingProfile
    from modelprops.introspection.definitions import PropertyDefinition

logger = logging.getLogger(__name__)


class BeanPropertyNamingStrategy(ABC):
    """Maps a property definition to its external name for each direction"""

    @abstractmethod
    def name_for_serialization(self, definition: "PropertyDefinition") -> str:
        ...

    @abstractmethod
    def name_for_deserialization(self, definition: "PropertyDefinition") -> str:
        ...

    @abstractmethod
    def set_profile(self, profile: "MarshalingProfile") -> None:
        """Install the marshaling profile; must be called once before naming."""

    def resolve_name(self, definition: "PropertyDefinition", direction: Direction) -> str:
        if direction is Direction.SERIALIZATION:
            return self.name_for_serialization(definition)
        return self.name_for_deserialization(definition)


class ProfileNamingStrategy(BeanPropertyNamingStrategy):
    """
    Names properties the way the installed MarshalingProfile would write them

    Explicit names win; otherwise the class-level policy (json_naming) or the
    profile's naming policy translates the internal name.
    """

    def __init__(self, profile: Optional["MarshalingProfile"] = None):
        self._profile = profile

    def set_profile(self, profile: "MarshalingProfile") -> None:
        self._profile = profile

    def name_for_serialization(self, definition: "PropertyDefinition") -> str:
        return self._name(definition)

    def name_for_deserialization(self, definition: "PropertyDefinition") -> str:
        return self._name(definition)

    def _name(self, definition: "PropertyDefinition") -> str:
        if self._profile is None:
            raise ProfileNotConfiguredError(
                "Naming strategy used before a MarshalingProfile was installed"
            )
        if definition.has_explicit_name:
            return definition.name

        policy = getattr(definition, "naming_policy", None) or self._profile.naming_policy
        translated = policy.translate(definition.internal_name)
        if not translated:
            # names must never be empty
            logger.debug(f"Policy {policy.value} produced no name for '{definition.internal_name}'")
            return definition.internal_name
        return translated
