import os

import pytest

from student_records.core.exceptions import StorageError
from student_records.models import Student
from student_records.repositories import FileStudentRepository


def test_construction_creates_empty_store(store_path):
    assert not store_path.exists()

    FileStudentRepository(store_path)

    assert store_path.exists()
    assert store_path.read_text() == ""


def test_construction_keeps_existing_store(store_path):
    store_path.write_text("S1,Alice,20,CS\n")

    repository = FileStudentRepository(store_path)

    assert repository.list_all() == [Student("S1", "Alice", 20, "CS")]


def test_add_writes_one_line_per_record(file_repository, store_path):
    file_repository.add(Student("S1", "Alice", 20, "CS"))
    file_repository.add(Student("S2", "Bob", 22, "Math"))

    with open(store_path, newline="") as handle:
        content = handle.read()

    assert content == f"S1,Alice,20,CS{os.linesep}S2,Bob,22,Math{os.linesep}"


def test_malformed_lines_are_skipped(store_path):
    store_path.write_text("S1,Alice,20,CS\nR1,Name,20\n\nS2,Bob,abc,Math\n")

    repository = FileStudentRepository(store_path)

    assert repository.list_all() == [
        Student("S1", "Alice", 20, "CS"),
        Student("S2", "Bob", 0, "Math"),
    ]


def test_windows_line_endings_are_accepted(store_path):
    store_path.write_bytes(b"S1,Alice,20,CS\r\nS2,Bob,22,Math\r\n")

    repository = FileStudentRepository(store_path)

    assert [s.roll_number for s in repository.list_all()] == ["S1", "S2"]


def test_rewrite_drops_malformed_lines(store_path):
    store_path.write_text("S1,Alice,20,CS\nbroken line\nS2,Bob,22,Math\n")
    repository = FileStudentRepository(store_path)

    repository.delete("S2")

    assert store_path.read_text() == "S1,Alice,20,CS\n"


def test_failed_update_leaves_file_untouched(store_path):
    original = "S1,Alice,20,CS\nbroken line\n"
    store_path.write_text(original)
    repository = FileStudentRepository(store_path)

    assert repository.update("S9", Student("S9", "Nobody", 1, "None")) is False
    assert repository.delete("S9") is False
    assert store_path.read_text() == original


def test_embedded_comma_makes_record_unreadable(file_repository):
    file_repository.add(Student("S1", "Doe, Jane", 22, "Law"))

    assert file_repository.list_all() == []


def test_missing_store_lists_nothing(file_repository, store_path):
    store_path.unlink()

    assert file_repository.list_all() == []


def test_creation_failure_is_logged_not_raised(tmp_path, log_messages):
    path = tmp_path / "missing-dir" / "students.txt"

    repository = FileStudentRepository(path)

    assert any(
        level == "ERROR" and "Error while creating data file" in message
        for level, message in log_messages
    )
    assert repository.list_all() == []
    with pytest.raises(StorageError) as excinfo:
        repository.add(Student("S1", "Alice", 20, "CS"))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_store_raises_storage_error(store_path):
    store_path.write_bytes(b"S1,\xff\xfe,20,CS\n")
    repository = FileStudentRepository(store_path)

    with pytest.raises(StorageError):
        repository.list_all()


def test_encoding_is_configurable(store_path):
    repository = FileStudentRepository(store_path, encoding="latin-1")

    repository.add(Student("S1", "José", 20, "CS"))

    assert store_path.read_bytes().startswith(b"S1,Jos\xe9,20,CS")
    assert repository.list_all() == [Student("S1", "José", 20, "CS")]


def test_storage_error_is_an_os_error(store_path):
    store_path.mkdir()
    repository = FileStudentRepository(store_path)

    with pytest.raises(OSError):
        repository.add(Student("S1", "Alice", 20, "CS"))
