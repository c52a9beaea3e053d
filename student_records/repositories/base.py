"""Repository contract for student storage backends."""

from abc import ABC, abstractmethod
from typing import List

from student_records.models.student import Student


class StudentRepository(ABC):
    """
    Storage contract used by the menu shell.

    Any backend (flat file, database) implements these four operations.
    Implementations raise StorageError when the underlying store cannot be
    used.
    """

    @abstractmethod
    def add(self, student: Student) -> None:
        """Store a new record. Duplicate roll numbers are not rejected."""

    @abstractmethod
    def list_all(self) -> List[Student]:
        """Return every stored record in storage order."""

    @abstractmethod
    def update(self, roll_number: str, student: Student) -> bool:
        """Replace the first record with this roll number. Returns True if found."""

    @abstractmethod
    def delete(self, roll_number: str) -> bool:
        """Remove every record with this roll number. Returns True if any were removed."""
