"""Type resolution contexts and the type resolver.

The resolution context is the only injected dependency of the compiler: it
turns qualified names into type descriptors and binds signatures to members.
"""

from apisig.resolution.base import (
    PRIMITIVE_TYPES,
    ResolutionContext,
    TypeResolver,
    normalize_type_text,
)
from apisig.resolution.catalog import CatalogContext, MethodDecl, TypeCatalog, TypeDecl
from apisig.resolution.core_types import CORE_TYPES

__all__ = [
    "CORE_TYPES",
    "CatalogContext",
    "MethodDecl",
    "PRIMITIVE_TYPES",
    "ResolutionContext",
    "TypeCatalog",
    "TypeDecl",
    "TypeResolver",
    "normalize_type_text",
]
