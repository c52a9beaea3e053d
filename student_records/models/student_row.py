"""
Table model backing the database store.
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base
from .student import Student


class StudentRow(Base):
    """
    One stored student record.
    
    ``roll_number`` is indexed but deliberately not unique: duplicate roll
    numbers are allowed, exactly as in the flat-file store.
    """
    
    __tablename__ = "students"
    
    roll_number: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Student roll number (not enforced unique)"
    )
    
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=""
    )
    
    age: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0
    )
    
    course: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=""
    )
    
    @classmethod
    def from_student(cls, student: Student) -> "StudentRow":
        return cls(
            roll_number=student.roll_number,
            name=student.name,
            age=student.age,
            course=student.course,
        )
    
    def to_student(self) -> Student:
        return Student(
            roll_number=self.roll_number,
            name=self.name,
            age=self.age,
            course=self.course,
        )
    
    def assign(self, student: Student) -> None:
        """Overwrite every field with the values from ``student``."""
        self.roll_number = student.roll_number
        self.name = student.name
        self.age = student.age
        self.course = student.course
    
    def __repr__(self) -> str:
        return f"<StudentRow(id={self.id}, roll_number={self.roll_number})>"
