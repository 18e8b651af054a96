from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Enum as SAEnum
from sqlalchemy.types import TypeDecorator
from datetime import datetime, timezone
from typing import Optional
import enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC copy of ``value``; naive values are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timestamp column that always hands back aware UTC datetimes.

    SQLite keeps no offset, so values are written as UTC and tagged as UTC
    again on the way out.
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(SQLModel, table=True):
    """Task row on the board.

    Status is enforced by the database as well: a native ``task_status`` enum
    on PostgreSQL, a CHECK constraint elsewhere.
    """
    __tablename__ = "tasks"
    # Never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(
        default=None, sa_column=Column(UTCDateTime, nullable=True)
    )
    status: TaskStatus = Field(
        default=TaskStatus.TODO,
        sa_column=Column(
            SAEnum(
                TaskStatus,
                name="task_status",
                create_constraint=True,
                values_callable=lambda statuses: [s.value for s in statuses],
            ),
            nullable=False,
            default=TaskStatus.TODO.value,
        ),
    )
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCDateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(UTCDateTime, nullable=False)
    )
