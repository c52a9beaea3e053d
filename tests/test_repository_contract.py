"""Behaviour every StudentRepository backend must share."""

from student_records.models import Student


def test_empty_store_lists_nothing(repository):
    assert repository.list_all() == []


def test_add_appends_record_last(repository, alice):
    repository.add(Student("S0", "Zed", 30, "Art"))
    before = repository.list_all()

    repository.add(alice)
    after = repository.list_all()

    assert len(after) == len(before) + 1
    assert after[-1] == alice


def test_listing_is_repeatable(repository, alice):
    repository.add(alice)
    repository.add(Student("S2", "Bob", 22, "Math"))

    assert repository.list_all() == repository.list_all()


def test_add_allows_duplicate_roll_numbers(repository, alice):
    repository.add(alice)
    repository.add(alice)

    assert repository.list_all() == [alice, alice]


def test_update_replaces_in_place(repository):
    repository.add(Student("S1", "Alice", 20, "CS"))
    repository.add(Student("S2", "Bob", 22, "Math"))
    repository.add(Student("S3", "Cara", 19, "Bio"))

    found = repository.update("S2", Student("S2", "Robert", 23, "Physics"))

    assert found is True
    assert repository.list_all() == [
        Student("S1", "Alice", 20, "CS"),
        Student("S2", "Robert", 23, "Physics"),
        Student("S3", "Cara", 19, "Bio"),
    ]


def test_update_can_change_roll_number(repository, alice):
    repository.add(alice)

    assert repository.update("S1", Student("S9", "Alice", 20, "CS")) is True
    assert repository.list_all() == [Student("S9", "Alice", 20, "CS")]


def test_update_only_touches_first_match(repository):
    repository.add(Student("S1", "First", 20, "CS"))
    repository.add(Student("S1", "Second", 21, "CS"))

    repository.update("S1", Student("S1", "Changed", 40, "Art"))

    assert repository.list_all() == [
        Student("S1", "Changed", 40, "Art"),
        Student("S1", "Second", 21, "CS"),
    ]


def test_update_without_match_changes_nothing(repository, alice):
    repository.add(alice)
    before = repository.list_all()

    assert repository.update("missing", Student("missing", "X", 1, "Y")) is False
    assert repository.list_all() == before


def test_delete_removes_every_match(repository):
    repository.add(Student("S1", "First", 20, "CS"))
    repository.add(Student("S2", "Bob", 22, "Math"))
    repository.add(Student("S1", "Second", 21, "CS"))

    assert repository.delete("S1") is True
    assert repository.list_all() == [Student("S2", "Bob", 22, "Math")]


def test_delete_without_match_returns_false(repository, alice):
    repository.add(alice)

    assert repository.delete("S2") is False
    assert repository.list_all() == [alice]


def test_full_lifecycle(repository):
    student = Student("S1", "Alice", 20, "CS")

    repository.add(student)
    assert repository.list_all() == [student]

    assert repository.update("S1", Student("S1", "Alice", 21, "CS")) is True
    assert repository.list_all() == [Student("S1", "Alice", 21, "CS")]

    assert repository.delete("S1") is True
    assert repository.list_all() == []
