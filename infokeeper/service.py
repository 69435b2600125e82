"""
Record service: the use cases the controllers call.

Converts between Record and RecordRow and forwards to the repository.
Mutations never raise: any failure is logged and reported as False (or None
for add_record). Listing is not wrapped, so a broken store surfaces to the
caller.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from .logger import StructuredLogger, get_logger
from .mapper import to_record, to_row
from .models import Record
from .repository import RecordRepository


class RecordService:

    def __init__(self, repository: RecordRepository, logger: Optional[StructuredLogger] = None):
        self.repository = repository
        self.logger = logger or get_logger()

    def add_record(self, record: Record) -> Optional[int]:
        """Store a record and return its id, or None when the store failed."""
        ok, record_id = self._run(
            "insert",
            lambda: self.repository.insert(to_row(record)),
            lambda: {"record_id": record.id},
        )
        return record_id if ok else None

    def insert_record(self, record: Record) -> bool:
        """Store a new record (or replace the one with the same id)."""
        return self.add_record(record) is not None

    def update_record(self, record: Record) -> bool:
        """Replace the stored record with record.id. False if it does not exist."""
        ok, _ = self._run(
            "update",
            lambda: self.repository.update(to_row(record)),
            lambda: {"record_id": record.id},
        )
        return ok

    def delete_record(self, record_id: int) -> bool:
        """Delete by id. Deleting a missing id still succeeds."""
        ok, _ = self._run(
            "delete",
            lambda: self.repository.delete(record_id),
            lambda: {"record_id": record_id},
        )
        return ok

    def list_records(self) -> List[Record]:
        return [to_record(row) for row in self.repository.get_all()]

    def _run(
        self,
        operation: str,
        action: Callable[[], Any],
        describe: Callable[[], Dict[str, Any]],
    ) -> Tuple[bool, Any]:
        # describe() reads the argument, so it runs inside the guard too
        context: Dict[str, Any] = {}
        try:
            context.update(describe())
            result = action()
        except Exception as e:
            self.logger.record_operation(operation, error=e)
            self.logger.error(f"Record {operation} failed: {e}", operation=operation, error=str(e), **context)
            return False, None

        self.logger.record_operation(operation)
        self.logger.debug(f"Record {operation} succeeded", result=result, **context)
        return True, result
