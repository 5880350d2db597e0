"""
Task Registry System.

Provides the task model, request validation, in-memory storage and the
HTTP routes of the Tareas API.
"""

from app.task_registry.api import TaskRouter, create_task_router, register_error_handlers
from app.task_registry.domain import (
    FieldErrors,
    Invalid,
    RegistryPort,
    Task,
    TaskCreate,
    TaskNotFoundError,
    TaskRegistryError,
    TaskUpdate,
    TaskValidationError,
    Valid,
    validate_payload,
)
from app.task_registry.infrastructure import SEED_TASKS, InMemoryTaskRegistry

__all__ = [
    # Domain
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
    "validate_payload",
    # Infrastructure
    "InMemoryTaskRegistry",
    "SEED_TASKS",
    # API
    "TaskRouter",
    "create_task_router",
    "register_error_handlers",
]
