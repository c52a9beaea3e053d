"""Shared fixtures for the Student Records test suite."""

import pytest
from loguru import logger

from student_records.models import Student
from student_records.repositories import DatabaseStudentRepository, FileStudentRepository


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "students.txt"


@pytest.fixture
def file_repository(store_path):
    return FileStudentRepository(store_path)


@pytest.fixture
def database_repository(tmp_path):
    repository = DatabaseStudentRepository(f"sqlite:///{tmp_path / 'students.db'}")
    yield repository
    repository.close()


@pytest.fixture(params=["file", "database"])
def repository(request):
    """Every backend, so contract tests run against each implementation."""
    if request.param == "file":
        return request.getfixturevalue("file_repository")
    return request.getfixturevalue("database_repository")


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test as (level, message) pairs."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def alice():
    return Student("S1", "Alice", 20, "CS")
