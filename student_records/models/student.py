"""
Student record model.

Defines the Student entity and its one-line text representation used by
the flat-file store: ``roll_number,name,age,course``.
"""

import re
from dataclasses import dataclass
from typing import Optional

DELIMITER = ","
FIELD_COUNT = 4

_AGE_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Student:
    """A single student record."""
    roll_number: str
    name: str
    age: int
    course: str

    def to_line(self) -> str:
        """Serialize the record to a single line (without terminator)."""
        return serialize(self)

    @classmethod
    def from_line(cls, line: str) -> Optional["Student"]:
        """Parse a stored line, returning None for malformed lines."""
        return deserialize(line)


def parse_age(text: str) -> int:
    """
    Parse the stored age field.

    Anything that is not a plain non-negative decimal integer falls back
    to 0 instead of rejecting the record.
    """
    if _AGE_PATTERN.fullmatch(text):
        return int(text)
    return 0


def serialize(student: Student) -> str:
    """
    Join the record fields with commas.

    Embedded commas are written as-is; the format has no escaping.
    """
    return DELIMITER.join(
        [student.roll_number, student.name, str(student.age), student.course]
    )


def deserialize(line: str) -> Optional[Student]:
    """
    Parse one stored line into a Student.

    Args:
        line: Raw line, with or without its line terminator

    Returns:
        Student if the line has exactly four fields, None otherwise
    """
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        return None

    roll_number, name, age, course = parts
    return Student(
        roll_number=roll_number,
        name=name,
        age=parse_age(age),
        course=course,
    )
