"""
FastAPI integration for the task registry.
Provides the CRUD routes over a RegistryPort.
"""

import re
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, status
from pydantic import BaseModel

from app.task_registry.domain.errors import TaskNotFoundError, TaskValidationError
from app.task_registry.domain.registry_port import RegistryPort
from app.task_registry.domain.task_model import Task, TaskCreate, TaskUpdate
from app.task_registry.domain.validation import Invalid, validate_payload

NOT_FOUND_MESSAGE = "No existe"

_CREATE_EXAMPLE = {"titulo": "Comprar pan", "hecho": False}
_UPDATE_EXAMPLE = {"hecho": True}

_TASK_ID_PATTERN = re.compile(r"-?[0-9]+")

TaskIdPath = Annotated[
    str,
    Path(description="Integer task id. Anything else matches no task.", examples=["1"]),
]


class HealthResponse(BaseModel):
    """Response of the health check."""

    ok: bool


class NotFoundResponse(BaseModel):
    """Body returned when a task id does not exist."""

    error: str


class ValidationErrorResponse(BaseModel):
    """Body returned when a payload fails validation."""

    formErrors: list[str]
    fieldErrors: dict[str, list[str]]


def parse_task_id(raw_id: str) -> int:
    """
    Parse a task id taken from the request path.

    Args:
        raw_id: Path segment.

    Returns:
        The integer id.

    Raises:
        TaskNotFoundError: If the segment is not a plain ASCII integer, since
            no task can have such an id.
    """
    # int() alone would also take "1_0" and non-ASCII digits.
    if not _TASK_ID_PATTERN.fullmatch(raw_id):
        raise TaskNotFoundError(raw_id)
    return int(raw_id)


class TaskRouter:
    """
    FastAPI router for the task registry.

    Example usage:
        ```python
        from fastapi import FastAPI

        app = FastAPI()
        registry = InMemoryTaskRegistry.with_seed_tasks()

        task_router = TaskRouter(registry)
        app.include_router(task_router.router)
        register_error_handlers(app)

        # Now you can GET /tareas, POST /tareas, PATCH /tareas/{id}, ...
        ```
    """

    def __init__(
        self,
        registry: RegistryPort,
        prefix: str = "",
        tags: Sequence[str] | None = None,
    ):
        """
        Initialize the router.

        Args:
            registry: Storage the routes read and mutate.
            prefix: URL prefix for the routes.
            tags: OpenAPI tags for documentation.
        """
        if tags is None:
            tags = ["Tareas"]

        self.registry = registry
        self.router = APIRouter(prefix=prefix, tags=list(tags))
        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup the API routes."""
        not_found: dict[int | str, dict[str, Any]] = {
            status.HTTP_404_NOT_FOUND: {"model": NotFoundResponse}
        }
        invalid: dict[int | str, dict[str, Any]] = {
            status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}
        }

        @self.router.get(
            "/health",
            response_model=HealthResponse,
            summary="Health check",
            tags=["Health"],
        )
        async def health() -> HealthResponse:
            return HealthResponse(ok=True)

        @self.router.get(
            "/tareas",
            response_model=list[Task],
            summary="List tasks",
            description="Return every task in insertion order.",
        )
        async def list_tasks() -> list[Task]:
            return self.registry.get_all()

        @self.router.get(
            "/tareas/{task_id}",
            response_model=Task,
            responses=not_found,
            summary="Get a task",
        )
        async def get_task(task_id: TaskIdPath) -> Task:
            task = self.registry.get(parse_task_id(task_id))
            if task is None:
                raise TaskNotFoundError(task_id)
            return task

        @self.router.post(
            "/tareas",
            response_model=Task,
            status_code=status.HTTP_201_CREATED,
            responses=invalid,
            summary="Create a task",
        )
        async def create_task(
            payload: Any = Body(default=None, examples=[_CREATE_EXAMPLE]),
        ) -> Task:
            """
            Create a task.

            Raises:
                TaskValidationError: If the payload is invalid. Nothing is stored.
            """
            result = validate_payload(TaskCreate, payload)
            if isinstance(result, Invalid):
                raise TaskValidationError(result.errors)
            return self.registry.create(result.value)

        @self.router.patch(
            "/tareas/{task_id}",
            response_model=Task,
            responses={**not_found, **invalid},
            summary="Update a task",
            description="Change only the supplied fields of a task.",
        )
        async def update_task(
            task_id: TaskIdPath,
            payload: Any = Body(default=None, examples=[_UPDATE_EXAMPLE]),
        ) -> Task:
            """
            Partially update a task.

            The id is checked before the payload, so an unknown id is reported
            as not found even when the payload is also invalid.

            Raises:
                TaskNotFoundError: If no task has this id.
                TaskValidationError: If the payload is invalid. Nothing changes.
            """
            parsed_id = parse_task_id(task_id)
            if self.registry.get(parsed_id) is None:
                raise TaskNotFoundError(task_id)

            result = validate_payload(TaskUpdate, payload)
            if isinstance(result, Invalid):
                raise TaskValidationError(result.errors)
            return self.registry.update(parsed_id, result.value)

        @self.router.delete(
            "/tareas/{task_id}",
            response_model=Task,
            responses=not_found,
            summary="Delete a task",
            description="Remove a task and return it as it was.",
        )
        async def delete_task(task_id: TaskIdPath) -> Task:
            return self.registry.delete(parse_task_id(task_id))


def create_task_router(
    registry: RegistryPort,
    prefix: str = "",
    tags: Sequence[str] | None = None,
) -> APIRouter:
    """
    Convenience function to create a FastAPI router for a task registry.

    Args:
        registry: The registry instance.
        prefix: URL prefix for the routes.
        tags: OpenAPI tags.

    Returns:
        Configured APIRouter instance.
    """
    return TaskRouter(registry, prefix, tags).router
