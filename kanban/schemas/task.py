from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from ..models import TaskStatus


class TaskCreate(BaseModel):
    """Schema for creating new tasks."""
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.TODO


class TaskUpdate(BaseModel):
    """Schema for partial task updates.

    Only fields the caller actually sent are applied: an omitted
    ``description`` is left alone, ``"description": null`` clears it.
    Read it with ``model_dump(exclude_unset=True)``, never by comparing
    attributes against ``None``.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None


class TaskRead(BaseModel):
    """Complete task schema with all fields."""
    id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TaskDeleted(BaseModel):
    """Confirmation returned by a delete."""
    success: bool = True
    id: int
