"""
Task registry interface.
Defines how tasks are stored, looked up and changed.
"""

from abc import ABC, abstractmethod

from app.task_registry.domain.task_model import Task, TaskCreate, TaskUpdate


class RegistryPort(ABC):
    """
    Interface for task storage.
    The in-memory registry implements it today; a database-backed one can
    replace it without touching the HTTP layer.
    """

    @abstractmethod
    def get_all(self) -> list[Task]:
        """
        Get all tasks.

        Returns:
            Tasks in insertion order.
        """
        ...

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        """
        Get a task by id.

        Args:
            task_id: Task identifier.

        Returns:
            The task if found, None otherwise.
        """
        ...

    @abstractmethod
    def create(self, data: TaskCreate) -> Task:
        """
        Store a new task under the next sequence id.

        Args:
            data: Validated creation payload.

        Returns:
            The created task.
        """
        ...

    @abstractmethod
    def update(self, task_id: int, data: TaskUpdate) -> Task:
        """
        Merge the supplied fields into an existing task.

        Args:
            task_id: Task identifier.
            data: Validated update payload. Unset fields keep their value.

        Returns:
            The updated task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        ...

    @abstractmethod
    def delete(self, task_id: int) -> Task:
        """
        Remove a task.

        Args:
            task_id: Task identifier.

        Returns:
            The task as it was before removal.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored tasks."""
        ...
