"""
Exception hierarchy for modelprops.
Every module raises a subclass of ModelPropsError for systemic faults.
"""

__all__ = [
    "ModelPropsError",
    "TypeResolutionError",
    "IntrospectionError",
    "ProfileNotConfiguredError",
    "CyclicUnwrapError",
    "TargetImportError",
]


class ModelPropsError(Exception):
    """Root exception for all modelprops errors."""


# ── Type resolution ──────────────────────────────────────────────────────────

class TypeResolutionError(ModelPropsError):
    """Raised when an annotation cannot be turned into a ResolvedType."""


# ── Introspection ────────────────────────────────────────────────────────────

class IntrospectionError(ModelPropsError):
    """Raised when a class cannot be introspected (not a class, broken MRO, ...)."""


class ProfileNotConfiguredError(ModelPropsError):
    """Raised when a collaborator is used before a MarshalingProfile is installed."""


# ── Property resolution ──────────────────────────────────────────────────────

class CyclicUnwrapError(ModelPropsError):
    """Raised when an unwrapped property leads back to a type already being expanded."""

    def __init__(self, type_name: str, chain: tuple = ()):
        self.type_name = type_name
        self.chain = chain
        path = " -> ".join(list(chain) + [type_name])
        super().__init__(f"Cyclic unwrap detected: {path}")


# ── CLI ──────────────────────────────────────────────────────────────────────

class TargetImportError(ModelPropsError):
    """Raised when a MODULE:CLASS target cannot be imported."""
