"""
Main application entry point for Student Records.

This module configures logging, picks the storage backend from settings
and runs the interactive menu.
"""

import sys
from typing import Optional, TextIO
from sqlalchemy.exc import SQLAlchemyError
from loguru import logger

from student_records.config import Settings, load_settings
from student_records.handlers.menu import StudentShell
from student_records.repositories import (
    DatabaseStudentRepository,
    FileStudentRepository,
    StudentRepository,
)


class StudentRecordsApp:
    """
    Main application class for Student Records.
    
    Handles logging setup, repository construction and the shell lifecycle.
    """
    
    def __init__(self, settings: Settings):
        """Initialize the application with validated settings."""
        self.settings = settings
        self.repository: Optional[StudentRepository] = None
        
        configure_logging(settings)
        
        logger.info("Student Records application initialized")
        logger.debug(f"Storage backend: {settings.storage_backend}")
        logger.debug(f"Log level: {settings.log_level}")
    
    def build_repository(self) -> StudentRepository:
        """Create the repository selected by ``storage_backend``."""
        if self.settings.storage_backend == "database":
            logger.info("Using database storage backend")
            return DatabaseStudentRepository(
                self.settings.database_url,
                echo=self.settings.debug,
                pool_size=self.settings.db_pool_size,
                max_overflow=self.settings.db_max_overflow,
            )
        
        logger.info(f"Using file storage backend: {self.settings.data_file}")
        return FileStudentRepository(
            self.settings.data_file,
            encoding=self.settings.file_encoding,
        )
    
    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """
        Run the menu until the user exits.
        
        Returns:
            Process exit code, 1 if the storage backend cannot be opened
        """
        try:
            self.repository = self.build_repository()
        except (SQLAlchemyError, ImportError) as e:
            logger.error(f"Failed to open storage backend: {e}")
            return 1
        
        try:
            return StudentShell(self.repository, stdin, stdout).run()
        finally:
            self.shutdown()
    
    def shutdown(self) -> None:
        if isinstance(self.repository, DatabaseStudentRepository):
            self.repository.close()
        logger.info("Application shutdown complete")


def configure_logging(settings: Settings) -> None:
    """Install the stderr sink and, if configured, a rotating file sink."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.log_level
    )
    
    if settings.log_file_path:
        logger.add(
            settings.log_file_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=settings.log_level,
            rotation="1 day",
            retention="30 days",
            compression="gz"
        )


def main() -> int:
    """Console entry point."""
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error(f"Application failed: {e}")
        return 1
    
    app = StudentRecordsApp(settings)
    try:
        return app.run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
