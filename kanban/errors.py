"""Error taxonomy shared by the task service, the HTTP API and the board client."""


class KanbanError(Exception):
    """Base class for all board errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(KanbanError):
    """Malformed or missing required input (e.g. an empty title)."""

    status_code = 422


class NotFoundError(KanbanError):
    """The operation targets a task id that does not exist."""

    status_code = 404

    def __init__(self, task_id: int):
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class StorageError(KanbanError):
    """Persistence, transport or constraint failure underneath an operation."""

    status_code = 500
