"""
Field validation for person records.

Every check is a pure function returning a ValidationResult. Invalid input
is reported as a value, never raised, so callers can show one message per
field and let the user correct it.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .enums import Gender, JobTitle

MAX_NAME_LENGTH = 20
MAX_AGE = 100

# Optional sign and ASCII digits only: no "5_0", "1e2" or other int() extras
_AGE_PATTERN = re.compile(r"[+-]?[0-9]+")


class ValidationError(str, Enum):
    NAME_EMPTY = "name_empty"
    NAME_TOO_LONG = "name_too_long"
    AGE_NOT_A_NUMBER = "age_not_a_number"
    AGE_ZERO = "age_zero"
    AGE_NEGATIVE = "age_negative"
    AGE_TOO_HIGH = "age_too_high"
    JOB_TITLE_NOT_SELECTED = "job_title_not_selected"
    GENDER_NOT_SELECTED = "gender_not_selected"


MESSAGES: Dict[ValidationError, str] = {
    ValidationError.NAME_EMPTY: "Name cannot be empty",
    ValidationError.NAME_TOO_LONG: f"Name cannot be longer than {MAX_NAME_LENGTH} characters",
    ValidationError.AGE_NOT_A_NUMBER: "Age must be a number",
    ValidationError.AGE_ZERO: "Age cannot be zero",
    ValidationError.AGE_NEGATIVE: "Age cannot be negative",
    ValidationError.AGE_TOO_HIGH: f"Age cannot be higher than {MAX_AGE}",
    ValidationError.JOB_TITLE_NOT_SELECTED: "Please select a job title",
    ValidationError.GENDER_NOT_SELECTED: "Please select a gender",
}


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool = False
    error: Optional[ValidationError] = None

    @property
    def message(self) -> str:
        return error_message(self.error)


VALID = ValidationResult(is_valid=True)


def _invalid(error: ValidationError) -> ValidationResult:
    return ValidationResult(is_valid=False, error=error)


def error_message(error: Optional[ValidationError]) -> str:
    """User-facing text for an error code ("" when there is no error)."""
    if error is None:
        return ""
    return MESSAGES[error]


def validate_name(name: str) -> ValidationResult:
    if not isinstance(name, str) or name.strip() == "":
        return _invalid(ValidationError.NAME_EMPTY)
    if len(name) > MAX_NAME_LENGTH:
        return _invalid(ValidationError.NAME_TOO_LONG)
    return VALID


def parse_age(age: Any) -> Optional[int]:
    """
    Parse raw age input into an int.

    Accepts ints and plain decimal strings (surrounding whitespace allowed).
    Returns None for anything else, including bools and floats.
    """
    if isinstance(age, bool):
        return None
    if isinstance(age, int):
        return age
    if not isinstance(age, str):
        return None
    text = age.strip()
    if not _AGE_PATTERN.fullmatch(text):
        return None
    return int(text)


def validate_age(age: Any) -> ValidationResult:
    """
    Validate age as entered by the user.

    Checks run in order: not a number, zero, negative, above MAX_AGE.
    """
    value = parse_age(age)
    if value is None:
        return _invalid(ValidationError.AGE_NOT_A_NUMBER)
    if value == 0:
        return _invalid(ValidationError.AGE_ZERO)
    if value < 0:
        return _invalid(ValidationError.AGE_NEGATIVE)
    if value > MAX_AGE:
        return _invalid(ValidationError.AGE_TOO_HIGH)
    return VALID


def validate_job_title(job_title: JobTitle) -> ValidationResult:
    if job_title == JobTitle.NOT_SELECTED:
        return _invalid(ValidationError.JOB_TITLE_NOT_SELECTED)
    return VALID


def validate_gender(gender: Gender) -> ValidationResult:
    if gender == Gender.NOT_SELECTED:
        return _invalid(ValidationError.GENDER_NOT_SELECTED)
    return VALID


@dataclass(frozen=True)
class FieldValidation:
    """Per-field results for one form submission. Defaults to all valid."""

    name: ValidationResult = field(default=VALID)
    age: ValidationResult = field(default=VALID)
    job_title: ValidationResult = field(default=VALID)
    gender: ValidationResult = field(default=VALID)

    @property
    def is_valid(self) -> bool:
        return self.name.is_valid and self.age.is_valid and self.job_title.is_valid and self.gender.is_valid

    def errors(self) -> List[Tuple[str, ValidationError]]:
        """(field, error) pairs for every failing field, in form order."""
        results = [
            ("name", self.name),
            ("age", self.age),
            ("job_title", self.job_title),
            ("gender", self.gender),
        ]
        return [(f, r.error) for f, r in results if not r.is_valid]


def validate_fields(name: str, age: Any, job_title: JobTitle, gender: Gender) -> FieldValidation:
    return FieldValidation(
        name=validate_name(name),
        age=validate_age(age),
        job_title=validate_job_title(job_title),
        gender=validate_gender(gender),
    )


def validate_record(record) -> FieldValidation:
    """Validate an already built Record (see models.Record)."""
    return validate_fields(record.name, record.age, record.job_title, record.gender)
