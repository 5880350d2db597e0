"""
In-memory task registry.
Stores tasks in an ordered map keyed by id.
"""

import logging
from collections.abc import Iterable

from app.task_registry.domain.errors import TaskNotFoundError
from app.task_registry.domain.registry_port import RegistryPort
from app.task_registry.domain.task_model import Task, TaskCreate, TaskUpdate

SEED_TASKS: tuple[Task, ...] = (
    Task(id=1, titulo="Primera", hecho=False),
    Task(id=2, titulo="Segunda", hecho=True),
)


class InMemoryTaskRegistry(RegistryPort):
    """
    In-memory task registry.

    Tasks live for the lifetime of the registry object; nothing is persisted.
    Mutations never await, so on a single event loop each one completes
    before another request can observe the registry.

    Example:
        registry = InMemoryTaskRegistry.with_seed_tasks()

        task = registry.create(TaskCreate(titulo="Comprar pan"))
        registry.update(task.id, TaskUpdate(hecho=True))
        registry.delete(task.id)
    """

    def __init__(self, tasks: Iterable[Task] = (), id_start: int | None = None) -> None:
        """
        Initialize the registry.

        Args:
            tasks: Initial tasks, stored in the given order.
            id_start: First id handed out by create. Raised above the largest
                existing id when lower.

        Raises:
            ValueError: If two initial tasks share an id.
        """
        self._tasks: dict[int, Task] = {}

        for task in tasks:
            if task.id in self._tasks:
                raise ValueError(f"Task id {task.id} is duplicated")
            self._tasks[task.id] = task.model_copy()

        next_id = max(self._tasks, default=0) + 1
        self._next_id = max(next_id, id_start) if id_start is not None else next_id

    @classmethod
    def with_seed_tasks(cls, id_start: int | None = None) -> "InMemoryTaskRegistry":
        """Create a registry holding the two startup tasks."""
        return cls(SEED_TASKS, id_start=id_start)

    @property
    def next_id(self) -> int:
        """Id the next created task will get."""
        return self._next_id

    def get_all(self) -> list[Task]:
        return [task.model_copy() for task in self._tasks.values()]

    def get(self, task_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy() if task else None

    def create(self, data: TaskCreate) -> Task:
        task = Task(id=self._next_id, titulo=data.titulo, hecho=data.hecho)
        self._next_id += 1
        self._tasks[task.id] = task

        logging.info(f"Created task {task.id} ('{task.titulo}')")
        return task.model_copy()

    def update(self, task_id: int, data: TaskUpdate) -> Task:
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id)

        changes = data.changes()
        # Replacing the value keeps the key's position in the dict.
        self._tasks[task_id] = self._tasks[task_id].model_copy(update=changes)

        logging.info(f"Updated task {task_id} (fields: {sorted(changes)})")
        return self._tasks[task_id].model_copy()

    def delete(self, task_id: int) -> Task:
        if task_id not in self._tasks:
            raise TaskNotFoundError(task_id)

        task = self._tasks.pop(task_id)

        logging.info(f"Deleted task {task_id}")
        return task

    def count(self) -> int:
        return len(self._tasks)
