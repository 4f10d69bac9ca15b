"""Data models for the apisig method signature compiler.

This module defines the resolved type descriptors, arguments, member handles
and method models that flow from the parser to downstream code generators.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Letter, "_" or "$" first, then letters, digits, "_" or "$"; Unicode letters allowed
IDENTIFIER_PATTERN = re.compile(r"^(?:[^\W\d]|\$)[\w$]*\Z")


class TypeKind(str, Enum):
    """Kind of resolved type."""

    PRIMITIVE = "PRIMITIVE"
    CLASS = "CLASS"
    ARRAY = "ARRAY"


class TypeDescriptor(BaseModel):
    """Resolved type: a primitive, a named class, or an N-dimensional array."""

    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    name: str = Field(..., description="Canonical name (e.g. int, java.lang.String, int[][])")
    component: TypeDescriptor | None = Field(None, description="Element type for arrays")
    dimensions: int = Field(0, ge=0, description="Array dimensions (0 for non-arrays)")

    @classmethod
    def primitive(cls, name: str) -> TypeDescriptor:
        return cls(kind=TypeKind.PRIMITIVE, name=name)

    @classmethod
    def named(cls, qualified_name: str) -> TypeDescriptor:
        return cls(kind=TypeKind.CLASS, name=qualified_name)

    @classmethod
    def array_of(cls, component: TypeDescriptor, dimensions: int = 1) -> TypeDescriptor:
        """Wrap a type in an array of the given number of dimensions.

        Wrapping an array adds to its dimensions, so the component is always
        the innermost element type.
        """
        if dimensions < 1:
            raise ValueError(f"Array dimensions must be positive, got {dimensions}")
        if component.kind == TypeKind.ARRAY and component.component is not None:
            dimensions += component.dimensions
            component = component.component
        return cls(
            kind=TypeKind.ARRAY,
            name=component.name + "[]" * dimensions,
            component=component,
            dimensions=dimensions,
        )

    @property
    def is_void(self) -> bool:
        """True for the primitive that denotes "no value"."""
        return self.kind == TypeKind.PRIMITIVE and self.name == "void"

    def __str__(self) -> str:
        return self.name


class Argument(BaseModel):
    """A named, typed method argument."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Argument name")
    type: TypeDescriptor = Field(..., description="Resolved argument type")

    @field_validator("name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not IDENTIFIER_PATTERN.match(value):
            raise ValueError(f"Invalid argument name: {value!r}")
        return value

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


class MemberHandle(BaseModel):
    """Reference to a member declared on a catalogued type."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Qualified name of the declaring type")
    name: str = Field(..., description="Member name")
    parameter_types: tuple[TypeDescriptor, ...] = Field(default_factory=tuple)
    return_type: str | None = Field(None, description="Declared return type text")
    is_static: bool = False

    def __str__(self) -> str:
        params = ", ".join(str(t) for t in self.parameter_types)
        return f"{self.owner}.{self.name}({params})"


class MethodModel(BaseModel):
    """A parsed API method bound to a member of the target type.

    Every field except ``unique_name`` is frozen once constructed. The unique
    name is assigned when the batch is canonicalized.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., frozen=True, description="Declared method name")
    result_type: TypeDescriptor = Field(..., frozen=True, description="Resolved return type")
    arguments: tuple[Argument, ...] = Field(
        default_factory=tuple, frozen=True, description="Arguments in declaration order"
    )
    member: MemberHandle = Field(..., frozen=True, description="Bound target member")
    unique_name: str | None = Field(None, description="Collision-free generated name")

    @property
    def argument_types(self) -> tuple[TypeDescriptor, ...]:
        return tuple(argument.type for argument in self.arguments)

    @property
    def argument_names(self) -> tuple[str, ...]:
        return tuple(argument.name for argument in self.arguments)

    def __str__(self) -> str:
        args = ", ".join(str(argument) for argument in self.arguments)
        return f"{self.result_type} {self.name}({args});"
