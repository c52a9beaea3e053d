"""
Student Records models package.

Contains the Student record with its line codec, and the table model used
by the database-backed store.
"""

from .base import Base
from .student import Student, serialize, deserialize, parse_age, DELIMITER, FIELD_COUNT
from .student_row import StudentRow

metadata = Base.metadata

__all__ = [
    "Base",
    "metadata",
    "Student",
    "StudentRow",
    "serialize",
    "deserialize",
    "parse_age",
    "DELIMITER",
    "FIELD_COUNT",
]
