"""
Type Resolver - Turns Python annotations into ResolvedType descriptors.

Supports:
- Plain classes and builtin generics (list[str], Dict[str, int])
- typing constructs (Optional, Union, Annotated, Literal, ClassVar, Any)
- TypeVar substitution from the parameterization of the owning type
- Generic base classes (class ItemPage(Page[Item]))
"""

import inspect
import logging
import typing
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from modelprops.exceptions import TypeResolutionError
from modelprops.schema.models import ResolvedType

logger = logging.getLogger(__name__)

NONE_TYPE = type(None)

TypeBindings = Mapping[TypeVar, ResolvedType]

# Wrappers that only decorate the real type
_TRANSPARENT_ORIGINS = (typing.Annotated, typing.ClassVar, typing.Final)


class TypeResolver:
    """Resolves annotations to ResolvedType, substituting bound type variables"""

    def resolve(self, annotation: Any, bindings: Optional[TypeBindings] = None) -> ResolvedType:
        """
        Resolve an annotation

        Args:
            annotation: Evaluated annotation (class, typing construct, TypeVar)
            bindings: TypeVar -> ResolvedType substitutions of the owning type

        Returns:
            ResolvedType for the annotation

        Raises:
            TypeResolutionError: If the annotation is a dangling forward reference
                or something that is not a type
        """
        bindings = bindings or {}

        if isinstance(annotation, ResolvedType):
            return annotation
        if annotation is None or annotation is NONE_TYPE:
            return ResolvedType(NONE_TYPE)
        if annotation is Any or annotation is inspect.Parameter.empty:
            return ResolvedType(object)
        if isinstance(annotation, (str, typing.ForwardRef)):
            raise TypeResolutionError(f"Unresolved forward reference: {annotation!r}")

        if isinstance(annotation, TypeVar):
            if annotation in bindings:
                return bindings[annotation]
            if annotation.__bound__ is not None:
                return self.resolve(annotation.__bound__, bindings)
            return ResolvedType(object)

        origin = typing.get_origin(annotation)
        if origin in _TRANSPARENT_ORIGINS:
            return self.resolve(typing.get_args(annotation)[0], bindings)
        if origin is typing.Literal:
            values = typing.get_args(annotation)
            return ResolvedType(type(values[0]) if values else object)
        if origin is not None:
            params = tuple(self._resolve_argument(arg, bindings) for arg in typing.get_args(annotation))
            return ResolvedType(origin, params)

        if isinstance(annotation, type):
            return ResolvedType(annotation)

        raise TypeResolutionError(f"Cannot resolve type from {annotation!r}")

    def _resolve_argument(self, argument: Any, bindings: TypeBindings) -> ResolvedType:
        # Callable[[int, str], bool] carries its parameters as a list
        if isinstance(argument, (list, tuple)):
            return ResolvedType(list, tuple(self.resolve(a, bindings) for a in argument))
        if argument is Ellipsis:
            return ResolvedType(object)
        return self.resolve(argument, bindings)

    def type_bindings(self, resolved_type: ResolvedType) -> Dict[TypeVar, ResolvedType]:
        """
        Collect TypeVar substitutions for a resolved type

        Parameters of the type itself come first, then the arguments given to
        generic base classes anywhere in the MRO.
        """
        erased = resolved_type.erased_type
        bindings: Dict[TypeVar, ResolvedType] = {}

        for type_var, argument in zip(getattr(erased, "__parameters__", ()), resolved_type.type_parameters):
            bindings[type_var] = argument

        for klass in getattr(erased, "__mro__", ()):
            for base in vars(klass).get("__orig_bases__", ()):
                base_origin = typing.get_origin(base)
                if base_origin is None or base_origin in (typing.Generic, typing.Protocol):
                    continue
                base_params = getattr(base_origin, "__parameters__", ())
                for type_var, argument in zip(base_params, typing.get_args(base)):
                    if type_var not in bindings:
                        bindings[type_var] = self.resolve(argument, bindings)

        return bindings


def evaluated_hints(member: Callable) -> Dict[str, Any]:
    """
    Evaluated annotations of a function, Annotated metadata kept

    Raises:
        TypeResolutionError: If an annotation names something undefined
    """
    try:
        return typing.get_type_hints(member, include_extras=True)
    except (NameError, TypeError) as e:
        name = getattr(member, "__qualname__", repr(member))
        raise TypeResolutionError(f"Cannot evaluate annotations of {name}: {e}") from e


def class_annotations(klass: type) -> Dict[str, Any]:
    """
    Annotations declared directly on a class, in declaration order

    Falls back to the raw (possibly string) annotations when they cannot be
    evaluated; field annotations are only read for their markers.
    """
    try:
        return inspect.get_annotations(klass, eval_str=True)
    except (NameError, TypeError, SyntaxError) as e:
        logger.debug(f"Using raw annotations for {klass.__qualname__}: {e}")
        return inspect.get_annotations(klass)


def resolve_class(target: Any, resolver: Optional[TypeResolver] = None) -> ResolvedType:
    """Convenience: resolve a class or parameterized generic (``Page[Item]``)."""
    return (resolver or TypeResolver()).resolve(target)
