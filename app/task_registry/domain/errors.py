"""Errors raised by the task registry."""

from app.task_registry.domain.validation import FieldErrors


class TaskRegistryError(Exception):
    """Base class for task registry errors."""


class TaskNotFoundError(TaskRegistryError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: int | str) -> None:
        super().__init__(f"Task '{task_id}' does not exist")
        self.task_id = task_id


class TaskValidationError(TaskRegistryError):
    """Raised when a request payload fails validation."""

    def __init__(self, errors: FieldErrors) -> None:
        super().__init__(f"Invalid task payload: {errors.to_dict()}")
        self.errors = errors
