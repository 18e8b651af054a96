from .task import TaskCreate, TaskDeleted, TaskRead, TaskUpdate

__all__ = ["TaskCreate", "TaskDeleted", "TaskRead", "TaskUpdate"]
