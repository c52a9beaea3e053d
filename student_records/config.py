"""
Configuration management for Student Records.

This module provides type-safe configuration loading from environment variables
using Pydantic BaseSettings. Every setting has a default, so with no
environment at all the application stores records in ``students.txt`` in
the working directory.
"""

import codecs
import os
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from loguru import logger


class Settings(BaseSettings):
    """
    Application settings loaded from ``STUDENT_RECORDS_*`` environment variables.
    
    Values may also come from a ``.env`` file in the working directory.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="STUDENT_RECORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )
    
    # Storage Configuration
    storage_backend: str = Field(
        default="file",
        description="Storage backend: 'file' (flat text file) or 'database'"
    )
    
    data_file: str = Field(
        default="students.txt",
        description="Path of the flat-file store",
        min_length=1
    )
    
    file_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the flat-file store"
    )
    
    # Database Configuration
    database_url: str = Field(
        default="sqlite:///students.db",
        description="SQLAlchemy database URL for the database backend"
    )
    
    db_pool_size: int = Field(
        default=5,
        description="Database connection pool size (ignored for SQLite)",
        ge=1,
        le=20
    )
    
    db_max_overflow: int = Field(
        default=10,
        description="Maximum overflow connections in pool (ignored for SQLite)",
        ge=0,
        le=50
    )
    
    # Application Settings
    debug: bool = Field(
        default=False,
        description="Echo SQL statements for the database backend"
    )
    
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    
    log_file_path: Optional[str] = Field(
        default=None,
        description="Optional log file path for file logging"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the supported levels."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {", ".join(valid_levels)}')
        return v.upper()
    
    @field_validator('storage_backend')
    @classmethod
    def validate_storage_backend(cls, v):
        valid_backends = ['file', 'database']
        if v.lower() not in valid_backends:
            raise ValueError(f'storage_backend must be one of: {", ".join(valid_backends)}')
        return v.lower()
    
    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v):
        """Validate database URL parses as a SQLAlchemy URL."""
        try:
            make_url(v)
        except ArgumentError:
            raise ValueError(f'Database URL must look like <dialect>://...: {v}')
        return v
    
    @field_validator('file_encoding')
    @classmethod
    def validate_file_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f'Unknown file encoding: {v}')
        return v


def load_settings() -> Settings:
    """
    Load and validate application settings.
    
    Returns:
        Settings: Validated settings instance
        
    Raises:
        ValueError: If environment variables are invalid
    """
    try:
        env_file_path = ".env"
        if os.path.exists(env_file_path):
            logger.trace(f"Loading environment variables from {env_file_path}")
        else:
            logger.trace(f"No .env file found at {env_file_path}, using system environment variables")
        
        settings = Settings()
        
        logger.trace("Configuration loaded successfully")
        
        return settings
        
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise ValueError(f"Configuration error: {e}") from e


__all__ = ["Settings", "load_settings"]
