"""Task service: validated reads and writes against the tasks table.

Every function takes an open session and either returns the persisted
result or raises one of the errors in :mod:`kanban.errors`. Storage
failures are logged here, the session is rolled back, and the failure is
re-raised as ``StorageError``; nothing is retried.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..errors import NotFoundError, StorageError, ValidationError
from ..models import Task, TaskStatus
from ..models.task import as_utc, utcnow
from ..schemas.task import TaskCreate, TaskDeleted, TaskUpdate

logger = logging.getLogger(__name__)

# Largest id a 64-bit INTEGER column can hold
MAX_TASK_ID = 2**63 - 1


def _get_update_data(task_update: TaskUpdate) -> dict:
    return task_update.model_dump(exclude_unset=True)


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Title is required")
    return title.strip()


def _next_timestamp(previous: datetime) -> datetime:
    """Current time, but never at or before ``previous``."""
    now = utcnow()
    previous = as_utc(previous)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def _commit(db: Session, action: str, task: Optional[Task] = None) -> None:
    try:
        db.commit()
        if task is not None:
            db.refresh(task)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Task %s failed", action)
        raise StorageError(f"Task {action} failed: {e}") from e


def create_task(db: Session, task_in: TaskCreate) -> Task:
    """Insert a new task and return it with its generated id and timestamps."""
    title = _clean_title(task_in.title)
    now = utcnow()
    task = Task(
        title=title,
        description=task_in.description,
        due_date=as_utc(task_in.due_date),
        status=task_in.status,
        created_at=now,
        updated_at=now,
    )
    db.add(task)
    _commit(db, "creation", task)
    logger.info("Created task %s (%s)", task.id, task.status.value)
    return task


def get_tasks(db: Session, status: Optional[TaskStatus] = None) -> List[Task]:
    """All tasks, or only those in ``status``, oldest first.

    Creation times can collide, so the id breaks ties in insertion order.
    """
    query = select(Task)
    if status is not None:
        query = query.where(Task.status == status)
    query = query.order_by(Task.created_at.asc(), Task.id.asc())

    try:
        return list(db.exec(query).all())
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch tasks")
        raise StorageError(f"Failed to fetch tasks: {e}") from e


def get_task(db: Session, task_id: int) -> Task:
    if not 0 < task_id <= MAX_TASK_ID:
        raise NotFoundError(task_id)
    try:
        task = db.get(Task, task_id)
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch task %s", task_id)
        raise StorageError(f"Failed to fetch task {task_id}: {e}") from e
    if task is None:
        raise NotFoundError(task_id)
    return task


def update_task(db: Session, task_id: int, task_update: TaskUpdate) -> Task:
    """Apply the fields present in ``task_update`` and bump ``updated_at``.

    An update that carries no fields at all is still valid and only moves
    ``updated_at`` forward.
    """
    changes = _get_update_data(task_update)
    if "title" in changes:
        changes["title"] = _clean_title(changes["title"])
    if "status" in changes and changes["status"] is None:
        raise ValidationError("Status cannot be cleared")
    if "due_date" in changes:
        changes["due_date"] = as_utc(changes["due_date"])

    task = get_task(db, task_id)
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = _next_timestamp(task.updated_at)

    db.add(task)
    _commit(db, "update", task)
    logger.info("Updated task %s fields=%s", task_id, sorted(changes))
    return task


def delete_task(db: Session, task_id: int) -> TaskDeleted:
    task = get_task(db, task_id)
    db.delete(task)
    _commit(db, "deletion")
    logger.info("Deleted task %s", task_id)
    return TaskDeleted(success=True, id=task_id)
