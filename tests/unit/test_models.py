"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from apisig.core.models import Argument, MemberHandle, MethodModel, TypeDescriptor, TypeKind

INT = TypeDescriptor.primitive("int")
STRING = TypeDescriptor.named("java.lang.String")


class TestEnums:
    """Tests for enum values."""

    def test_type_kind_values(self) -> None:
        assert TypeKind.PRIMITIVE.value == "PRIMITIVE"
        assert TypeKind.CLASS.value == "CLASS"
        assert TypeKind.ARRAY.value == "ARRAY"


class TestTypeDescriptor:
    """Tests for TypeDescriptor."""

    def test_named(self) -> None:
        assert STRING.kind == TypeKind.CLASS
        assert str(STRING) == "java.lang.String"
        assert STRING.dimensions == 0
        assert STRING.component is None

    def test_array_of(self) -> None:
        array = TypeDescriptor.array_of(STRING, 2)
        assert array.kind == TypeKind.ARRAY
        assert array.name == "java.lang.String[][]"
        assert array.component == STRING
        assert array.dimensions == 2

    def test_array_of_array_flattens(self) -> None:
        nested = TypeDescriptor.array_of(TypeDescriptor.array_of(INT), 2)
        assert nested == TypeDescriptor.array_of(INT, 3)

    def test_array_of_rejects_zero_dimensions(self) -> None:
        with pytest.raises(ValueError):
            TypeDescriptor.array_of(INT, 0)

    def test_equality_and_hash(self) -> None:
        assert TypeDescriptor.primitive("int") == INT
        assert hash(TypeDescriptor.primitive("int")) == hash(INT)
        assert TypeDescriptor.array_of(INT) != TypeDescriptor.array_of(INT, 2)
        assert len({INT, TypeDescriptor.primitive("int"), STRING}) == 2

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            INT.name = "long"  # type: ignore[misc]


class TestArgument:
    """Tests for Argument."""

    def test_equality(self) -> None:
        assert Argument(name="id", type=INT) == Argument(name="id", type=INT)
        assert Argument(name="id", type=INT) != Argument(name="id", type=STRING)
        assert Argument(name="id", type=INT) != Argument(name="key", type=INT)

    def test_str(self) -> None:
        assert str(Argument(name="id", type=STRING)) == "java.lang.String id"

    @pytest.mark.parametrize("name", ["", "1id", "a-b", "a b", "id\n", "\u0661x"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError):
            Argument(name=name, type=INT)

    @pytest.mark.parametrize(
        "name", ["id", "_id", "$id", "id2", "$", "native$", "größe", "\u00e9t\u00e9"]
    )
    def test_valid_name(self, name: str) -> None:
        assert Argument(name=name, type=INT).name == name


class TestMethodModel:
    """Tests for MethodModel."""

    @pytest.fixture
    def model(self) -> MethodModel:
        return MethodModel(
            name="get",
            result_type=STRING,
            arguments=(Argument(name="id", type=STRING), Argument(name="version", type=INT)),
            member=MemberHandle(owner="a.Api", name="get", parameter_types=(STRING, INT)),
        )

    def test_unique_name_initially_absent(self, model: MethodModel) -> None:
        assert model.unique_name is None

    def test_unique_name_assignable(self, model: MethodModel) -> None:
        model.unique_name = "GET"
        assert model.unique_name == "GET"

    def test_other_fields_frozen(self, model: MethodModel) -> None:
        with pytest.raises(ValidationError):
            model.name = "put"  # type: ignore[misc]
        with pytest.raises(ValidationError):
            model.arguments = ()  # type: ignore[misc]

    def test_argument_views(self, model: MethodModel) -> None:
        assert model.argument_names == ("id", "version")
        assert model.argument_types == (STRING, INT)

    def test_str(self, model: MethodModel) -> None:
        assert str(model) == "java.lang.String get(java.lang.String id, int version);"

    def test_member_str(self, model: MethodModel) -> None:
        assert str(model.member) == "a.Api.get(java.lang.String, int)"

    def test_missing_member(self) -> None:
        with pytest.raises(ValidationError):
            MethodModel(name="get", result_type=STRING)  # type: ignore[call-arg]
