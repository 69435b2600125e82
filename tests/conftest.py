"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path

from infokeeper.enums import Gender, JobTitle
from infokeeper.logger import StructuredLogger, reset_logger
from infokeeper.models import Record
from infokeeper.repository import RecordRepository
from infokeeper.service import RecordService


@pytest.fixture(autouse=True)
def fresh_global_logger():
    """Each test starts without a global logger."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "data" / "infokeeper.db"


@pytest.fixture
def logger(tmp_path) -> StructuredLogger:
    """Quiet logger writing only to a temporary log directory."""
    log = StructuredLogger(
        name="infokeeper-test",
        level="DEBUG",
        log_dir=tmp_path / "logs",
        enable_console=False,
    )
    yield log
    log.close()


@pytest.fixture
def repository(db_path) -> RecordRepository:
    repo = RecordRepository(db_path)
    yield repo
    repo.close()


@pytest.fixture
def service(repository, logger) -> RecordService:
    return RecordService(repository, logger=logger)


@pytest.fixture
def jane() -> Record:
    """Valid record that has not been stored yet."""
    return Record(
        name="Jane Doe",
        age=25,
        job_title=JobTitle.PRODUCT_MANAGER,
        gender=Gender.FEMALE,
    )


@pytest.fixture
def john() -> Record:
    return Record(
        name="John Doe",
        age=30,
        job_title=JobTitle.ANDROID_DEVELOPER,
        gender=Gender.MALE,
    )
