"""Core module containing models, errors, configuration and serializer."""

from apisig.core.errors import (
    ApiSignatureError,
    ArgumentConsistencyError,
    DuplicateSignatureError,
    MalformedSignatureError,
    MemberBindingError,
    TypeResolutionError,
)
from apisig.core.models import (
    Argument,
    MemberHandle,
    MethodModel,
    TypeDescriptor,
    TypeKind,
)
from apisig.core.serializer import (
    SerializationError,
    deserialize,
    deserialize_from_list,
    serialize,
    serialize_to_dict,
)

__all__ = [
    "ApiSignatureError",
    "Argument",
    "ArgumentConsistencyError",
    "DuplicateSignatureError",
    "MalformedSignatureError",
    "MemberBindingError",
    "MemberHandle",
    "MethodModel",
    "SerializationError",
    "TypeDescriptor",
    "TypeKind",
    "TypeResolutionError",
    "deserialize",
    "deserialize_from_list",
    "serialize",
    "serialize_to_dict",
]
