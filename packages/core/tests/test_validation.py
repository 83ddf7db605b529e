import pytest
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pieces_core import ValidationError, ValidationResult, errors_from_pydantic, validate_model


class Contact(BaseModel):
    name: str = Field(..., min_length=3)
    age: int = Field(..., gt=0)


def test_validate_model_success() -> None:
    model, result = validate_model(Contact, {"name": "Alice", "age": 30})

    assert result.is_valid
    assert result.errors == {}
    assert model is not None and model.age == 30


def test_validate_model_failure_collects_fields() -> None:
    model, result = validate_model(Contact, {"name": "Al", "age": -5})

    assert model is None
    assert not result.is_valid
    assert set(result.errors) == {"name", "age"}


def test_errors_from_pydantic_prefix() -> None:
    with pytest.raises(PydanticValidationError) as exc_info:
        Contact.model_validate({"name": "Al"})

    assert list(errors_from_pydantic(exc_info.value, prefix="contact")) == [
        "contact.name",
        "contact.age",
    ]


def test_result_merge_keeps_order() -> None:
    merged = ValidationResult.failure({"a": ["first"]}).merge(
        ValidationResult.failure({"b": ["second"], "a": ["third"]})
    )

    assert merged.errors == {"a": ["first", "third"], "b": ["second"]}
    assert merged.first_error == ("a", "first")
    assert not merged


def test_success_is_truthy_and_has_no_first_error() -> None:
    result = ValidationResult.success()
    assert result
    assert result.first_error is None
    result.raise_if_invalid()


def test_raise_if_invalid() -> None:
    result = ValidationResult.success()
    result.add_error("page", "must be >= 1")

    with pytest.raises(ValidationError) as exc_info:
        result.raise_if_invalid()

    assert exc_info.value.errors == {"page": ["must be >= 1"]}


def test_validation_error_from_string() -> None:
    assert ValidationError("boom").errors == {"__root__": ["boom"]}
    assert ValidationError().errors == {}
