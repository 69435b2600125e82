"""
Database schema and connection management.

Uses SQLite with SQLAlchemy for record storage.
"""

from pathlib import Path
from sqlalchemy import create_engine, Column, Enum, Integer, String
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .enums import Gender, JobTitle

Base = declarative_base()


class RecordRow(Base):
    """Stored person record."""

    __tablename__ = "records"
    # AUTOINCREMENT: ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    # Enum tags are stored as text so the file stays readable without the app
    job_title = Column(
        "jobTitle",
        Enum(JobTitle, native_enum=False, length=32),
        nullable=False,
    )
    gender = Column(
        "gender",
        Enum(Gender, native_enum=False, length=16),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RecordRow id={self.id} name={self.name!r}>"


def get_engine(db_path: Path) -> Engine:
    """
    Create an engine for the database file, creating parent directories.

    Args:
        db_path: Path to SQLite database file
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}")


def init_database(db_path: Path) -> None:
    """
    Initialize database and create tables.

    Args:
        db_path: Path to SQLite database file
    """
    engine = get_engine(db_path)
    try:
        Base.metadata.create_all(engine)
    finally:
        engine.dispose()


def get_session(db_path: Path):
    """
    Get database session.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy session
    """
    engine = get_engine(db_path)
    Session = sessionmaker(bind=engine)
    return Session()
