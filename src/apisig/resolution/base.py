"""Type resolution for signature text.

This module defines the ResolutionContext interface, the single injected
dependency of the compiler, and the TypeResolver that turns type text into
type descriptors using primitive aliases, array suffixes and a default
namespace fallback on top of a context.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from types import MappingProxyType
from typing import Callable as CallableFunc

from apisig.core.errors import TypeResolutionError
from apisig.core.models import MemberHandle, TypeDescriptor

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = MappingProxyType(
    {
        name: TypeDescriptor.primitive(name)
        for name in (
            "boolean",
            "byte",
            "char",
            "short",
            "int",
            "long",
            "float",
            "double",
            "void",
        )
    }
)

_ARRAY_SUFFIX_PATTERN = re.compile(r"^(?P<base>[^\[\]]+)(?P<dims>(?:\[\])+)$")
_VARARGS_SUFFIX = "..."


def normalize_type_text(type_text: str) -> str:
    """Remove whitespace and turn a varargs suffix into one array dimension."""
    text = "".join(type_text.split())
    if text.endswith(_VARARGS_SUFFIX):
        text = text[: -len(_VARARGS_SUFFIX)] + "[]"
    return text


class ResolutionContext(ABC):
    """Lookup mechanism used to resolve type names and bind members.

    Implementations return None for anything they do not know; the caller
    decides whether that is an error.
    """

    @property
    @abstractmethod
    def default_namespace(self) -> str:
        """Namespace tried for unqualified names that do not resolve directly."""

    @abstractmethod
    def resolve(self, name: str) -> TypeDescriptor | None:
        """Resolve a fully qualified type name."""

    @abstractmethod
    def bind(
        self,
        target: TypeDescriptor,
        name: str,
        parameter_types: Sequence[TypeDescriptor],
    ) -> MemberHandle | None:
        """Find a member of target with this name and exact parameter types."""


class TypeResolver:
    """Resolve type text to descriptors.

    Resolution order:
    1. Primitive aliases (exact, case-sensitive)
    2. Direct lookup of the name as a fully qualified type
    3. Array suffixes, resolving the base type recursively
    4. The default namespace, for unqualified names only
    """

    def __init__(
        self,
        lookup: CallableFunc[[str], TypeDescriptor | None],
        default_namespace: str,
    ) -> None:
        self._lookup = lookup
        self._default_namespace = default_namespace

    @classmethod
    def for_context(cls, context: ResolutionContext) -> TypeResolver:
        return cls(context.resolve, context.default_namespace)

    def resolve(self, type_text: str) -> TypeDescriptor:
        """Resolve type text or raise TypeResolutionError with the original text."""
        result = self.try_resolve(type_text)
        if result is None:
            raise TypeResolutionError(type_text)
        return result

    def try_resolve(self, type_text: str) -> TypeDescriptor | None:
        """Resolve type text, returning None when no fallback applies."""
        name = normalize_type_text(type_text)
        if not name:
            return None

        primitive = PRIMITIVE_TYPES.get(name)
        if primitive is not None:
            return primitive

        result = self._lookup(name)
        if result is not None:
            return result

        array_match = _ARRAY_SUFFIX_PATTERN.match(name)
        if array_match:
            component = self.try_resolve(array_match.group("base"))
            if component is None:
                return None
            dimensions = len(array_match.group("dims")) // 2
            return TypeDescriptor.array_of(component, dimensions)

        if "." not in name and self._default_namespace:
            logger.debug(f"Retrying {name} in default namespace {self._default_namespace}")
            return self._lookup(f"{self._default_namespace}.{name}")

        return None
