# Client side of the board: API client, board state and drag-and-drop
#
# Components:
#   api.py        - async httpx client for the task endpoints
#   controller.py - board state container, column partitions, overdue flags
#   drag.py       - drag-and-drop state machine
from .api import TaskApi
from .controller import COLUMNS, COLUMN_TITLES, BoardController, CreateTaskForm, is_overdue
from .drag import ColumnBounds, DragInteraction, DragPhase

__all__ = [
    "COLUMNS",
    "COLUMN_TITLES",
    "BoardController",
    "ColumnBounds",
    "CreateTaskForm",
    "DragInteraction",
    "DragPhase",
    "TaskApi",
    "is_overdue",
]
