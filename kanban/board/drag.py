"""
Drag-and-drop interaction for moving cards between status columns.

Lifecycle:
  idle → dragging(task) → idle

start() picks a card up, enter()/leave() only move the highlighted drop
target, drop() decides whether the gesture is a move, and end() always
puts the machine back to idle, whether or not a drop ever fired.
"""
from enum import Enum
from typing import NamedTuple, Optional

from ..models import TaskStatus
from ..schemas.task import TaskRead


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class ColumnBounds(NamedTuple):
    """Bounding rectangle of a column on screen."""
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class DragInteraction:
    def __init__(self):
        self.task: Optional[TaskRead] = None
        self.drop_target: Optional[TaskStatus] = None

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self.task is None else DragPhase.DRAGGING

    def start(self, task: TaskRead) -> None:
        self.task = task
        self.drop_target = None

    def enter(self, column: TaskStatus) -> None:
        if self.task is not None:
            self.drop_target = column

    def leave(self, x: float, y: float, bounds: ColumnBounds) -> None:
        # Moving onto a child element fires leave too; only clear once the
        # pointer is really outside the column.
        if not bounds.contains(x, y):
            self.drop_target = None

    def drop(self, column: TaskStatus) -> Optional[TaskRead]:
        """Finish the gesture on ``column``.

        Returns the card to move, or None when nothing was being dragged or
        the card already sits in that column.
        """
        task = self.task
        self.end()
        if task is None or task.status == column:
            return None
        return task

    def end(self) -> None:
        self.task = None
        self.drop_target = None
