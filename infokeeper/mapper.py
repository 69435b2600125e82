"""Conversions between the Record model and the stored RecordRow."""

from .database import RecordRow
from .models import Record


def to_row(record: Record) -> RecordRow:
    return RecordRow(
        id=record.id or None,
        name=record.name,
        age=record.age,
        job_title=record.job_title,
        gender=record.gender,
    )


def to_record(row: RecordRow) -> Record:
    return Record(
        id=row.id,
        name=row.name,
        age=row.age,
        job_title=row.job_title,
        gender=row.gender,
    )
