"""
Presentation controllers for the record form and the record list.

Each controller owns one state object, replaces it after every call
and notifies subscribers with the new state.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

from .enums import Gender, JobTitle
from .models import Record
from .service import RecordService
from .validator import FieldValidation, parse_age, validate_fields

GENERAL_ERROR = "Something went wrong, please try again"


@dataclass(frozen=True)
class FormState:
    name: str = ""
    age: str = ""
    job_title: JobTitle = JobTitle.NOT_SELECTED
    gender: Gender = Gender.NOT_SELECTED
    validation: FieldValidation = field(default_factory=FieldValidation)
    is_loading: bool = False
    error: Optional[str] = None
    saved: bool = False
    record_id: int = 0


@dataclass(frozen=True)
class ListState:
    records: List[Record] = field(default_factory=list)
    error: Optional[str] = None


class _Observable:
    def __init__(self, state):
        self._state = state
        self._subscribers: List[Callable[[Any], None]] = []

    @property
    def state(self):
        return self._state

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register callback for state changes. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_state(self, **changes):
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            callback(self._state)


class RecordFormController(_Observable):
    """
    Collects form input, validates it and saves the record.

    When built with an existing record the form starts filled in and
    submit updates that record instead of inserting a new one.
    """

    def __init__(self, service: RecordService, record: Optional[Record] = None):
        self.service = service
        self.record = record
        if record is None:
            state = FormState()
        else:
            state = FormState(
                name=record.name,
                age=str(record.age),
                job_title=record.job_title,
                gender=record.gender,
            )
        super().__init__(state)

    def submit(self, name: str, age: Any, job_title: JobTitle, gender: Gender) -> bool:
        """
        Validate the input and save it when every field is valid.

        Returns:
            True if the record was stored
        """
        age_text = age if isinstance(age, str) else str(age)
        validation = validate_fields(name, age_text, job_title, gender)
        self._set_state(
            name=name,
            age=age_text,
            job_title=job_title,
            gender=gender,
            validation=validation,
            error=None,
            saved=False,
        )
        if not validation.is_valid:
            return False
        return self._save()

    def _save(self) -> bool:
        state = self.state
        record = Record(
            id=self.record.id if self.record else 0,
            name=state.name,
            age=parse_age(state.age),
            job_title=state.job_title,
            gender=state.gender,
        )

        self._set_state(is_loading=True)
        if self.record is None:
            record_id = self.service.add_record(record)
            saved = record_id is not None
        else:
            saved = self.service.update_record(record)
            record_id = record.id
        self._set_state(
            is_loading=False,
            saved=saved,
            record_id=record_id if saved else 0,
            error=None if saved else GENERAL_ERROR,
        )
        return saved


class RecordListController(_Observable):
    """Keeps the list of stored records and handles deletions."""

    def __init__(self, service: RecordService):
        self.service = service
        super().__init__(ListState())
        self.refresh()

    def refresh(self) -> List[Record]:
        self._set_state(records=self.service.list_records(), error=None)
        return self.state.records

    def delete(self, record_id: int) -> bool:
        deleted = self.service.delete_record(record_id)
        self.refresh()
        if not deleted:
            self._set_state(error=GENERAL_ERROR)
        return deleted
