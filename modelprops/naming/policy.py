"""Naming policies - translate internal property names to wire names."""

import re
from enum import Enum
from typing import List

# camelCase / PascalCase / ACRONYMCase word boundaries
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")
_SEPARATOR_RE = re.compile(r"[_\-.\s]+")


def split_words(name: str) -> List[str]:
    """
    Split a name into words

    Separators and camel-case humps both delimit words: "street_name" gives
    ["street", "name"], "postalURLCode" gives ["postal", "URL", "Code"].
    """
    words: List[str] = []
    for chunk in _SEPARATOR_RE.split(name):
        if chunk:
            words.extend(_WORD_RE.findall(chunk))
    return words


class NamingPolicy(str, Enum):
    """Wire naming conventions (mirrors the usual JSON library options)"""
    IDENTITY = "identity"
    LOWER_CAMEL_CASE = "lower_camel_case"
    UPPER_CAMEL_CASE = "upper_camel_case"
    SNAKE_CASE = "snake_case"
    UPPER_SNAKE_CASE = "upper_snake_case"
    KEBAB_CASE = "kebab_case"
    LOWER_CASE = "lower_case"
    LOWER_DOT_CASE = "lower_dot_case"

    @classmethod
    def parse(cls, value: str) -> "NamingPolicy":
        """Accept enum values or names, case and dash insensitive"""
        normalized = value.strip().lower().replace("-", "_")
        for policy in cls:
            if normalized in (policy.value, policy.name.lower()):
                return policy
        raise ValueError(f"Unknown naming policy: {value}")

    def translate(self, name: str) -> str:
        """Apply this policy to an internal property name"""
        if self is NamingPolicy.IDENTITY or not name:
            return name

        words = split_words(name)
        if not words:
            return name
        lowered = [w.lower() for w in words]

        if self is NamingPolicy.LOWER_CAMEL_CASE:
            return lowered[0] + "".join(w.capitalize() for w in lowered[1:])
        if self is NamingPolicy.UPPER_CAMEL_CASE:
            return "".join(w.capitalize() for w in lowered)
        if self is NamingPolicy.SNAKE_CASE:
            return "_".join(lowered)
        if self is NamingPolicy.UPPER_SNAKE_CASE:
            return "_".join(w.upper() for w in lowered)
        if self is NamingPolicy.KEBAB_CASE:
            return "-".join(lowered)
        if self is NamingPolicy.LOWER_DOT_CASE:
            return ".".join(lowered)
        return "".join(lowered)
