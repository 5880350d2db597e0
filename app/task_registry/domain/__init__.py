"""Domain layer for task registry."""

from app.task_registry.domain.errors import (
    TaskNotFoundError,
    TaskRegistryError,
    TaskValidationError,
)
from app.task_registry.domain.registry_port import RegistryPort
from app.task_registry.domain.task_model import Task, TaskCreate, TaskUpdate
from app.task_registry.domain.validation import (
    FieldErrors,
    Invalid,
    Valid,
    ValidationResult,
    validate_payload,
)

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "RegistryPort",
    "TaskRegistryError",
    "TaskNotFoundError",
    "TaskValidationError",
    "FieldErrors",
    "Valid",
    "Invalid",
    "ValidationResult",
    "validate_payload",
]
