"""
SQLAlchemy student repository.

Implements the same contract as the flat-file store on top of a single
``students`` table, so the shell can run against a database unchanged.
"""

from typing import List
from sqlalchemy import delete as sql_delete, select
from sqlalchemy.exc import SQLAlchemyError
from loguru import logger

from student_records.core.database import (
    create_database_engine,
    create_session_factory,
    session_scope,
)
from student_records.core.exceptions import StorageError
from student_records.models.base import Base
from student_records.models.student import Student
from student_records.models.student_row import StudentRow
from student_records.repositories.base import StudentRepository


class DatabaseStudentRepository(StudentRepository):
    """
    Repository backed by a relational database.
    
    Rows are ordered by their autoincrement id, which mirrors line order in
    the flat file. Duplicate roll numbers behave as in the file store:
    update touches the first match, delete removes all of them.
    """
    
    def __init__(self, database_url: str, echo: bool = False, **engine_options):
        """
        Initialize the repository and create the table if needed.
        
        Args:
            database_url: SQLAlchemy database URL
            echo: Log SQL statements
            **engine_options: Passed to create_database_engine (pool sizing)
        """
        self.engine = create_database_engine(database_url, echo=echo, **engine_options)
        self.session_factory = create_session_factory(self.engine)
        self._ensure_store()
    
    def _ensure_store(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
            logger.debug("Students table is ready")
        except SQLAlchemyError as e:
            logger.error(f"Error while creating students table: {e}")
    
    def add(self, student: Student) -> None:
        try:
            with session_scope(self.session_factory) as db:
                db.add(StudentRow.from_student(student))
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot add student {student.roll_number}: {e}") from e
        
        logger.debug(f"Inserted student {student.roll_number}")
    
    def list_all(self) -> List[Student]:
        try:
            with session_scope(self.session_factory) as db:
                rows = db.scalars(select(StudentRow).order_by(StudentRow.id)).all()
                students = [row.to_student() for row in rows]
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot list students: {e}") from e
        
        logger.debug(f"Loaded {len(students)} students from database")
        return students
    
    def update(self, roll_number: str, student: Student) -> bool:
        try:
            with session_scope(self.session_factory) as db:
                row = db.scalars(
                    select(StudentRow)
                    .where(StudentRow.roll_number == roll_number)
                    .order_by(StudentRow.id)
                    .limit(1)
                ).first()
                
                if row is None:
                    logger.debug(f"No student with roll number {roll_number} to update")
                    return False
                
                row.assign(student)
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot update student {roll_number}: {e}") from e
        
        logger.debug(f"Updated student {roll_number}")
        return True
    
    def delete(self, roll_number: str) -> bool:
        try:
            with session_scope(self.session_factory) as db:
                result = db.execute(
                    sql_delete(StudentRow).where(StudentRow.roll_number == roll_number)
                )
                removed = result.rowcount
        except SQLAlchemyError as e:
            raise StorageError(f"Cannot delete student {roll_number}: {e}") from e
        
        logger.debug(f"Deleted {removed} student(s) with roll number {roll_number}")
        return removed > 0
    
    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self.engine.dispose()
        logger.debug("Database connections closed")
