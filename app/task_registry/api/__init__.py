"""HTTP API for the task registry."""

from app.task_registry.api.error_handlers import register_error_handlers
from app.task_registry.api.fastapi_integration import (
    NOT_FOUND_MESSAGE,
    TaskRouter,
    create_task_router,
    parse_task_id,
)

__all__ = [
    "TaskRouter",
    "create_task_router",
    "register_error_handlers",
    "parse_task_id",
    "NOT_FOUND_MESSAGE",
]
