from .task_models import Task
from .task_store import TaskStore

__all__ = ["Task", "TaskStore"]
