"""
Task models.
The stored task record and the request payloads that create or change it.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class Task(BaseModel):
    """
    A task stored in the registry.

    Attributes:
        id: Unique, monotonically assigned identifier. Never reused.
        titulo: Non-empty title.
        hecho: Completion flag.
    """

    id: int = Field(description="Task identifier", examples=[1])
    titulo: str = Field(min_length=1, description="Task title", examples=["Primera"])
    hecho: bool = Field(default=False, description="Whether the task is done")


class TaskCreate(BaseModel):
    """Payload accepted when creating a task."""

    model_config = ConfigDict(strict=True)

    titulo: str = Field(description="Task title", examples=["Comprar pan"])
    hecho: bool = Field(default=False, description="Whether the task is done")

    @field_validator("titulo")
    @classmethod
    def _titulo_required(cls, value: str) -> str:
        if len(value) < 1:
            raise PydanticCustomError("titulo_required", "Título requerido")
        return value


class TaskUpdate(BaseModel):
    """
    Payload accepted when partially updating a task.

    Every field is optional. Fields that are present must satisfy the same
    constraints as on creation, and an explicit null is rejected.
    """

    model_config = ConfigDict(strict=True)

    titulo: NonEmptyStr | None = Field(default=None, description="Task title")
    hecho: bool | None = Field(default=None, description="Whether the task is done")

    @field_validator("titulo", "hecho")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        # Only runs for keys present in the payload.
        if value is None:
            raise PydanticCustomError("null_not_allowed", "Expected a value, received null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were supplied in the payload."""
        return self.model_dump(exclude_unset=True)
