from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_db
from ..models import TaskStatus
from ..schemas.task import TaskCreate, TaskDeleted, TaskRead, TaskUpdate
from .. import services

router = APIRouter()


@router.get("/tasks", response_model=List[TaskRead])
def get_tasks(
    status: Optional[TaskStatus] = None,
    db: Session = Depends(get_db),
):
    """List tasks oldest first, optionally only those in one status column."""
    return services.get_tasks(db, status)


@router.post("/tasks", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
):
    """Create a new task."""
    return services.create_task(db, task)


@router.get("/tasks/{task_id}", response_model=TaskRead)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
):
    """Get a specific task by ID."""
    return services.get_task(db, task_id)


@router.patch("/tasks/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
):
    """Update the fields present in the body; omitted fields stay as they are."""
    return services.update_task(db, task_id, task_update)


@router.delete("/tasks/{task_id}", response_model=TaskDeleted)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
):
    """Delete a specific task."""
    return services.delete_task(db, task_id)
