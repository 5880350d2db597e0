"""
Request validation.

Turns an untrusted JSON payload into a typed request model, returning a tagged
result instead of raising so every mutating handler consumes it the same way.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class FieldErrors:
    """
    Validation errors grouped by top-level field.

    Attributes:
        form_errors: Errors that do not belong to a single field
            (e.g. the body is not an object).
        field_errors: Field name -> list of messages.
    """

    form_errors: list[str] = field(default_factory=list)
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "FieldErrors":
        """Flatten a pydantic ValidationError."""
        form_errors: list[str] = []
        field_errors: dict[str, list[str]] = {}

        for error in exc.errors():
            loc = error.get("loc", ())
            message = error["msg"]
            if loc:
                field_errors.setdefault(str(loc[0]), []).append(message)
            else:
                form_errors.append(message)

        return cls(form_errors=form_errors, field_errors=field_errors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON body returned to clients."""
        return {
            "formErrors": list(self.form_errors),
            "fieldErrors": {name: list(msgs) for name, msgs in self.field_errors.items()},
        }

    def __bool__(self) -> bool:
        return bool(self.form_errors or self.field_errors)


@dataclass(frozen=True)
class Valid(Generic[M]):
    """Successful validation carrying the parsed model."""

    value: M


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying the flattened errors."""

    errors: FieldErrors


ValidationResult = Valid[M] | Invalid


def validate_payload(model: type[M], payload: Any) -> ValidationResult[M]:
    """
    Validate a decoded JSON payload against a request model.

    Args:
        model: Request model class (e.g. TaskCreate).
        payload: Decoded JSON body. Anything other than an object is a
            form-level error.

    Returns:
        Valid with the parsed model, or Invalid with the field errors.
    """
    try:
        return Valid(model.model_validate(payload))
    except PydanticValidationError as e:
        return Invalid(FieldErrors.from_pydantic(e))
