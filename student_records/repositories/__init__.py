"""Storage backends for student records."""

from .base import StudentRepository
from .file import FileStudentRepository
from .database import DatabaseStudentRepository

__all__ = [
    "StudentRepository",
    "FileStudentRepository",
    "DatabaseStudentRepository",
]
