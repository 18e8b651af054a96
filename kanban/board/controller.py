"""
Board controller: the client-side copy of the task list.

The task list is only changed through four actions (load, append after a
create, replace-by-id after an update, remove-by-id after a delete), each
fed with rows returned by the server. Column partitions, counts and overdue
flags are computed from it on every read.

Failed calls are logged and leave the board exactly as it was.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Dict, List, Optional, Set

from ..errors import KanbanError
from ..models import TaskStatus
from ..schemas.task import TaskRead
from .api import TaskApi
from .drag import ColumnBounds, DragInteraction

logger = logging.getLogger(__name__)

COLUMNS = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.DONE)
COLUMN_TITLES = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}


def is_overdue(
    task: TaskRead, today: Optional[date] = None, tz: Optional[tzinfo] = None
) -> bool:
    """True when the due date falls on a calendar day before ``today``.

    A task due today is never overdue, whatever the time of day. The server
    returns due dates in UTC; they are moved into ``tz`` (the local zone by
    default) before taking the calendar day.
    """
    if task.due_date is None:
        return False
    due = task.due_date
    if due.tzinfo is not None:
        due = due.astimezone(tz)
    today = today or datetime.now(tz).date()
    return due.date() < today


@dataclass
class CreateTaskForm:
    """Input held by the create dialog."""
    title: str = ""
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.TODO

    def reset(self) -> None:
        self.title = ""
        self.description = None
        self.due_date = None
        self.status = TaskStatus.TODO


class BoardController:
    def __init__(self, api: TaskApi):
        self.api = api
        self.drag = DragInteraction()
        self.form = CreateTaskForm()
        self.create_dialog_open = False
        self.is_loading = False
        self._tasks: List[TaskRead] = []
        self._updating: Set[int] = set()

    # -------------------- state --------------------
    @property
    def tasks(self) -> List[TaskRead]:
        return list(self._tasks)

    def _append(self, task: TaskRead) -> None:
        self._tasks.append(task)

    def _replace(self, task: TaskRead) -> None:
        self._tasks = [task if t.id == task.id else t for t in self._tasks]

    def _remove(self, task_id: int) -> None:
        self._tasks = [t for t in self._tasks if t.id != task_id]

    # -------------------- reads --------------------
    def tasks_in(self, status: TaskStatus) -> List[TaskRead]:
        return [t for t in self._tasks if t.status == status]

    def columns(self) -> Dict[TaskStatus, List[TaskRead]]:
        return {status: self.tasks_in(status) for status in COLUMNS}

    def counts(self) -> Dict[str, int]:
        counts = {"total": len(self._tasks)}
        for status in COLUMNS:
            counts[status.value] = len(self.tasks_in(status))
        return counts

    def overdue(
        self, today: Optional[date] = None, tz: Optional[tzinfo] = None
    ) -> List[TaskRead]:
        return [t for t in self._tasks if is_overdue(t, today, tz)]

    # -------------------- actions --------------------
    async def load(self) -> bool:
        try:
            self._tasks = await self.api.get_tasks()
        except KanbanError as e:
            logger.error("Failed to load tasks: %s", e)
            return False
        return True

    def open_create_dialog(self) -> None:
        self.create_dialog_open = True

    def close_create_dialog(self) -> None:
        self.create_dialog_open = False

    async def submit_create(self) -> Optional[TaskRead]:
        """Create a task from the dialog form.

        On failure the dialog stays open and the form keeps what was typed.
        """
        self.is_loading = True
        try:
            task = await self.api.create_task(
                title=self.form.title,
                description=self.form.description,
                due_date=self.form.due_date,
                status=self.form.status,
            )
        except KanbanError as e:
            logger.error("Failed to create task: %s", e)
            return None
        finally:
            self.is_loading = False

        self._append(task)
        self.form.reset()
        self.create_dialog_open = False
        return task

    async def delete(self, task_id: int) -> bool:
        try:
            await self.api.delete_task(task_id)
        except KanbanError as e:
            logger.error("Failed to delete task %s: %s", task_id, e)
            return False
        self._remove(task_id)
        return True

    # -------------------- drag and drop --------------------
    def drag_start(self, task: TaskRead) -> None:
        self.drag.start(task)

    def drag_enter(self, column: TaskStatus) -> None:
        self.drag.enter(column)

    def drag_leave(self, x: float, y: float, bounds: ColumnBounds) -> None:
        self.drag.leave(x, y, bounds)

    def drag_end(self) -> None:
        self.drag.end()

    async def drop(self, column: TaskStatus) -> Optional[TaskRead]:
        """Drop the dragged card on ``column``.

        Issues a single status-only update when the card changes column and
        swaps in the server's row once it answers. The card stays where it
        was until then, and stays there for good if the call fails.
        """
        task = self.drag.drop(column)
        if task is None:
            return None
        if task.id in self._updating:
            logger.debug("Task %s already has an update in flight", task.id)
            return None

        self._updating.add(task.id)
        try:
            updated = await self.api.update_task(task.id, status=column)
        except KanbanError as e:
            logger.error("Failed to update task status: %s", e)
            return None
        finally:
            self._updating.discard(task.id)

        self._replace(updated)
        return updated
