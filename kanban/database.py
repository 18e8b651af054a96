from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import NullPool

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401


def _create_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Postgres: disable pooling for serverless and enable pre-ping
    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


engine = _create_engine()


def get_db():
    """Dependency to get database session."""
    db = Session(engine)
    try:
        yield db
    finally:
        db.close()


def create_tables(bind=None):
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=bind or engine)
