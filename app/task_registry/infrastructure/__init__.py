"""Infrastructure layer for task registry."""

from app.task_registry.infrastructure.task_registry import SEED_TASKS, InMemoryTaskRegistry

__all__ = ["InMemoryTaskRegistry", "SEED_TASKS"]
