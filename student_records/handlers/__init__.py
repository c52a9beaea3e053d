"""Console handlers for Student Records."""

from .menu import StudentShell, format_student

__all__ = [
    "StudentShell",
    "format_student",
]
