"""Errors raised while compiling method signatures.

Every error aborts the whole batch. Each one carries the offending text so
callers can report a diagnostic without re-deriving it.
"""

from __future__ import annotations


class ApiSignatureError(Exception):
    """Base class for all signature compilation errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class MalformedSignatureError(ApiSignatureError):
    """Raised when a signature does not match the signature grammar."""

    def __init__(self, signature: str, details: str | None = None) -> None:
        super().__init__(f"Invalid method signature {signature}", details)
        self.signature = signature


class TypeResolutionError(ApiSignatureError):
    """Raised when a type name cannot be resolved through any fallback."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Error loading type {type_name}")
        self.type_name = type_name


class MemberBindingError(ApiSignatureError):
    """Raised when the target type has no member matching a signature."""

    def __init__(self, signature: str, target: str) -> None:
        super().__init__(f"Method not found [{signature}] in type {target}")
        self.signature = signature
        self.target = target


class ArgumentConsistencyError(ApiSignatureError):
    """Raised when one argument name is declared with different types."""

    def __init__(self, argument: str, first_type: str, second_type: str) -> None:
        super().__init__(
            f"Argument [{argument}] is used in multiple methods with different types "
            f"{first_type}, {second_type}"
        )
        self.argument = argument
        self.first_type = first_type
        self.second_type = second_type


class DuplicateSignatureError(ApiSignatureError):
    """Raised for indistinguishable methods when duplicates are configured as errors."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(f"Duplicate methods found [{first}], [{second}]")
        self.first = first
        self.second = second
