"""
Configuration settings for the Lumania plugin utilities.

This module centralizes all configuration values and provides a single source of truth for all
configurable parameters. Database credentials are not configured here; they are read from the
plugin's own database store at startup.
"""

import logging
import os


_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class Config:
    """
    Central configuration class for the Lumania plugin utilities.

    This class consolidates all configuration values including file locations,
    connection pool tuning, and logging parameters.
    """

    # Plugin Configuration
    APP_NAME: str = "Lumania-Utils"
    APP_VERSION: str = "1.0"

    # File Paths
    DATA_FOLDER: str = "plugins/Lumania"
    RESOURCE_DIR: str = os.path.join(_PROJECT_ROOT, "resources")
    DATABASE_CONFIG: str = "database.yml"
    SETUP_SCRIPT: str = "setup.sql"

    # Config Store Settings
    CONFIG_EXTENSION: str = ".yml"
    COLOR_CODE_CHAR: str = "&"

    # Database Pool Configuration
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_PRE_PING: bool = True
    STATEMENT_CACHE_SIZE: int = 250

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/lumania.log"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    def __init__(self):
        """Initialize configuration by loading from environment variables."""
        self._load_from_env()
        self._validate()

    def _load_from_env(self):
        """Load configuration values from environment variables."""
        # File paths
        data_folder = os.getenv("LUMANIA_DATA_FOLDER")
        if data_folder:
            self.DATA_FOLDER = data_folder

        resource_dir = os.getenv("LUMANIA_RESOURCE_DIR")
        if resource_dir:
            self.RESOURCE_DIR = resource_dir

        database_config = os.getenv("LUMANIA_DATABASE_CONFIG")
        if database_config:
            self.DATABASE_CONFIG = database_config

        setup_script = os.getenv("LUMANIA_SETUP_SCRIPT")
        if setup_script:
            self.SETUP_SCRIPT = setup_script

        # Database pool settings
        db_driver = os.getenv("LUMANIA_DB_DRIVER")
        if db_driver:
            self.DB_DRIVER = db_driver

        pool_size = os.getenv("LUMANIA_DB_POOL_SIZE")
        if pool_size:
            self.DB_POOL_SIZE = int(pool_size)

        max_overflow = os.getenv("LUMANIA_DB_MAX_OVERFLOW")
        if max_overflow:
            self.DB_MAX_OVERFLOW = int(max_overflow)

        pool_timeout = os.getenv("LUMANIA_DB_POOL_TIMEOUT")
        if pool_timeout:
            self.DB_POOL_TIMEOUT = int(pool_timeout)

        pre_ping = os.getenv("LUMANIA_DB_POOL_PRE_PING")
        if pre_ping:
            self.DB_POOL_PRE_PING = pre_ping.strip().lower() in ("1", "true", "yes")

        cache_size = os.getenv("LUMANIA_STATEMENT_CACHE_SIZE")
        if cache_size:
            self.STATEMENT_CACHE_SIZE = int(cache_size)

        # Logging settings
        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            self.LOG_LEVEL = log_level

        log_file = os.getenv("LUMANIA_LOG_FILE")
        if log_file:
            self.LOG_FILE = log_file

    def _validate(self):
        """
        Validate configuration values.

        Raises:
            ValueError: If a configuration value is unusable.
        """
        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(
                f"LOG_LEVEL '{self.LOG_LEVEL}' is not a valid logging level. "
                "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )

        if self.DB_POOL_SIZE < 1:
            raise ValueError(
                f"LUMANIA_DB_POOL_SIZE must be positive, got {self.DB_POOL_SIZE}."
            )

        if self.DB_MAX_OVERFLOW < 0:
            raise ValueError(
                f"LUMANIA_DB_MAX_OVERFLOW must not be negative, got {self.DB_MAX_OVERFLOW}."
            )

        if len(self.COLOR_CODE_CHAR) != 1:
            raise ValueError("COLOR_CODE_CHAR must be a single character.")

    def get_engine_options(self) -> dict:
        """
        Generate keyword arguments for SQLAlchemy's create_engine.

        Returns:
            dict: Pool and statement cache tuning options
        """
        return {
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_timeout": self.DB_POOL_TIMEOUT,
            "pool_pre_ping": self.DB_POOL_PRE_PING,
            "query_cache_size": self.STATEMENT_CACHE_SIZE,
        }


# Global configuration instance
config = Config()
