"""
Records Repository.

Responsibilities:
- CRUD operations for the records table.
- Transaction-safe writes: every call commits or rolls back its own session.

Non-Responsibilities:
- No validation.
- No error translation (storage errors propagate to the caller).

Invariant:
The table never holds two rows with the same id, and an id is never reused
after its row is deleted.
"""

from pathlib import Path
from typing import List

from sqlalchemy.orm import sessionmaker

from .database import Base, RecordRow, get_engine


class RecordNotFoundError(Exception):
    """Raised when updating a record id that is not stored."""

    def __init__(self, record_id: int):
        super().__init__(f"No record with id {record_id}")
        self.record_id = record_id


class RecordRepository:
    """Persistence gateway for RecordRow objects in one SQLite file."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.engine = get_engine(self.db_path)
        Base.metadata.create_all(self.engine)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def close(self) -> None:
        """Release the connection pool. The repository reconnects if used again."""
        self.engine.dispose()

    def insert(self, row: RecordRow) -> int:
        """
        Insert a row, or replace the stored row with the same id.

        A row whose id is 0 or None gets a new id.

        Returns:
            The id of the stored row
        """
        session = self._session_factory()
        try:
            if not row.id:
                row.id = None
                session.add(row)
                stored = row
            else:
                stored = session.merge(row)
            session.commit()
            return stored.id
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def update(self, row: RecordRow) -> None:
        """
        Replace the stored row with row.id.

        Raises:
            RecordNotFoundError: If no row has that id
        """
        session = self._session_factory()
        try:
            existing = session.get(RecordRow, row.id) if row.id else None
            if existing is None:
                raise RecordNotFoundError(row.id)
            existing.name = row.name
            existing.age = row.age
            existing.job_title = row.job_title
            existing.gender = row.gender
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, record_id: int) -> int:
        """
        Delete the row with record_id. Deleting a missing id is not an error.

        Returns:
            Number of rows removed (0 or 1)
        """
        session = self._session_factory()
        try:
            removed = session.query(RecordRow).filter_by(id=record_id).delete()
            session.commit()
            return removed
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_all(self) -> List[RecordRow]:
        """All rows, newest first."""
        session = self._session_factory()
        try:
            return session.query(RecordRow).order_by(RecordRow.id.desc()).all()
        finally:
            session.close()
