"""
Flat-file student repository.

Stores one serialized record per line. Appends go straight to the end of
the file; updates and deletes load the whole file and rewrite it.
"""

from pathlib import Path
from typing import List, Union
from loguru import logger

from student_records.core.exceptions import StorageError
from student_records.models.student import Student, deserialize, serialize
from student_records.repositories.base import StudentRepository


class FileStudentRepository(StudentRepository):
    """
    Repository backed by a comma-delimited text file.
    
    There is no cache: every call reads or writes the file, so the file is
    always the system of record. Rewrites are not atomic.
    """
    
    def __init__(self, file_path: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize the repository and make sure the store exists.
        
        Args:
            file_path: Path of the backing text file
            encoding: Text encoding used for reads and writes
        """
        self.file_path = Path(file_path)
        self.encoding = encoding
        self._ensure_store()
    
    def _ensure_store(self) -> None:
        """Create an empty store file if it is missing; failures are only logged."""
        try:
            if not self.file_path.exists():
                self.file_path.touch()
                logger.info(f"Created empty data file {self.file_path}")
        except OSError as e:
            logger.error(f"Error while creating data file {self.file_path}: {e}")
    
    def add(self, student: Student) -> None:
        try:
            with open(self.file_path, "a", encoding=self.encoding) as handle:
                handle.write(serialize(student) + "\n")
        except (OSError, UnicodeError) as e:
            raise StorageError(f"Cannot write to {self.file_path}: {e}") from e
        
        logger.debug(f"Appended student {student.roll_number} to {self.file_path}")
    
    def list_all(self) -> List[Student]:
        if not self.file_path.exists():
            return []
        
        students = []
        try:
            with open(self.file_path, "r", encoding=self.encoding) as handle:
                for line_number, line in enumerate(handle, start=1):
                    student = deserialize(line)
                    if student is None:
                        logger.debug(f"Skipping malformed line {line_number} in {self.file_path}")
                        continue
                    students.append(student)
        except (OSError, UnicodeError) as e:
            raise StorageError(f"Cannot read {self.file_path}: {e}") from e
        
        logger.debug(f"Loaded {len(students)} students from {self.file_path}")
        return students
    
    def update(self, roll_number: str, student: Student) -> bool:
        students = self.list_all()
        
        for index, current in enumerate(students):
            if current.roll_number == roll_number:
                students[index] = student
                break
        else:
            logger.debug(f"No student with roll number {roll_number} to update")
            return False
        
        self._write_all(students)
        logger.debug(f"Updated student {roll_number}")
        return True
    
    def delete(self, roll_number: str) -> bool:
        students = self.list_all()
        remaining = [s for s in students if s.roll_number != roll_number]
        
        if len(remaining) == len(students):
            logger.debug(f"No student with roll number {roll_number} to delete")
            return False
        
        self._write_all(remaining)
        logger.debug(f"Deleted {len(students) - len(remaining)} student(s) with roll number {roll_number}")
        return True
    
    def _write_all(self, students: List[Student]) -> None:
        """Replace the whole file with the given records."""
        try:
            with open(self.file_path, "w", encoding=self.encoding) as handle:
                for student in students:
                    handle.write(serialize(student) + "\n")
        except (OSError, UnicodeError) as e:
            raise StorageError(f"Cannot rewrite {self.file_path}: {e}") from e
