from .tasks import create_task, delete_task, get_task, get_tasks, update_task

__all__ = ["create_task", "delete_task", "get_task", "get_tasks", "update_task"]
