"""Application and marshaling configuration."""
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from modelprops.naming.policy import NamingPolicy


class Visibility(str, Enum):
    """Which fields count as property members"""
    PUBLIC_ONLY = "public_only"  # no leading underscore
    ANY = "any"
    NONE = "none"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class MarshalingProfile:
    """
    Global marshaling configuration: how property definitions are discovered
    and named. Installed once on the property provider before resolution.
    """

    naming_policy: NamingPolicy = NamingPolicy.IDENTITY
    field_visibility: Visibility = Visibility.PUBLIC_ONLY
    sort_properties_alphabetically: bool = False

    @classmethod
    def from_env(cls) -> "MarshalingProfile":
        """Load profile from environment variables."""
        return cls(
            naming_policy=NamingPolicy.parse(os.getenv("MODELPROPS_NAMING_POLICY", "identity")),
            field_visibility=Visibility(os.getenv("MODELPROPS_FIELD_VISIBILITY", "public_only").lower()),
            sort_properties_alphabetically=_env_flag("MODELPROPS_SORT_PROPERTIES"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "naming_policy": self.naming_policy.value,
            "field_visibility": self.field_visibility.value,
            "sort_properties_alphabetically": self.sort_properties_alphabetically,
        }


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: str = "./output"
    log_level: str = "WARNING"
    profile: MarshalingProfile = field(default_factory=MarshalingProfile)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            output_dir=os.getenv("MODELPROPS_OUTPUT_DIR", "./output"),
            log_level=os.getenv("MODELPROPS_LOG_LEVEL", "WARNING").upper(),
            profile=MarshalingProfile.from_env(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "output_dir": self.output_dir,
            "log_level": self.log_level,
            "profile": self.profile.to_dict(),
        }
