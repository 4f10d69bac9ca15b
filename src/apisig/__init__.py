"""apisig - compile API method signatures into uniquely named method models."""

from apisig.core import (
    ApiSignatureError,
    Argument,
    ArgumentConsistencyError,
    DuplicateSignatureError,
    MalformedSignatureError,
    MemberBindingError,
    MemberHandle,
    MethodModel,
    TypeDescriptor,
    TypeKind,
    TypeResolutionError,
)
from apisig.parser import ApiMethodParser
from apisig.resolution import CatalogContext, ResolutionContext, TypeCatalog, TypeResolver

__version__ = "0.1.0"

__all__ = [
    "ApiMethodParser",
    "ApiSignatureError",
    "Argument",
    "ArgumentConsistencyError",
    "CatalogContext",
    "DuplicateSignatureError",
    "MalformedSignatureError",
    "MemberBindingError",
    "MemberHandle",
    "MethodModel",
    "ResolutionContext",
    "TypeCatalog",
    "TypeDescriptor",
    "TypeKind",
    "TypeResolutionError",
    "TypeResolver",
]
