"""
Integration test fixtures and configuration.

This module provides pytest fixtures for running the startup path end to end:
bundled resources, a data folder, and a database. SQLite is always available;
PostgreSQL tests run only when a test database is configured.

Key fixtures:
- shipped_resources: ResourceBundle over the project's resources/ directory
- test_db_engine: SQLAlchemy engine connected to a PostgreSQL test database

Running integration tests:
    pytest tests/integration -v -m integration

    # With PostgreSQL
    LUMANIA_TEST_POSTGRES=1 pytest tests/integration -v -m integration
"""

import os
import time

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from config.settings import config
from utils.resources import ResourceBundle


def wait_for_db(
    engine: Engine, max_retries: int = 30, retry_delay: float = 1.0
) -> None:
    """
    Wait for database to be ready by attempting connections.

    Args:
        engine: SQLAlchemy engine to test
        max_retries: Maximum number of connection attempts
        retry_delay: Delay between retries in seconds

    Raises:
        RuntimeError: If database doesn't become ready within max_retries
    """
    for attempt in range(max_retries):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return
        except Exception as e:
            if attempt < max_retries - 1:
                time.sleep(retry_delay)
            else:
                raise RuntimeError(
                    f"Database not ready after {max_retries} attempts: {e}"
                ) from e


@pytest.fixture
def shipped_resources() -> ResourceBundle:
    """Provide the resources bundled with the project."""
    return ResourceBundle(config.RESOURCE_DIR)


@pytest.fixture(scope="session")
def test_db_engine() -> Engine:
    """
    Create a SQLAlchemy engine for the PostgreSQL test database.

    Environment Variables:
        LUMANIA_TEST_POSTGRES: Set to enable PostgreSQL tests
        POSTGRES_TEST_HOST: Test database host (default: localhost)
        POSTGRES_TEST_PORT: Test database port (default: 5434)
        POSTGRES_TEST_DB: Test database name (default: lumania_test)
        POSTGRES_TEST_USER: Test database user (default: postgres)
        POSTGRES_TEST_PASSWORD: Test database password (default: test_password)
    """
    if not os.getenv("LUMANIA_TEST_POSTGRES"):
        pytest.skip("LUMANIA_TEST_POSTGRES not set")

    host = os.getenv("POSTGRES_TEST_HOST", "localhost")
    port = os.getenv("POSTGRES_TEST_PORT", "5434")
    db = os.getenv("POSTGRES_TEST_DB", "lumania_test")
    user = os.getenv("POSTGRES_TEST_USER", "postgres")
    password = os.getenv("POSTGRES_TEST_PASSWORD", "test_password")

    engine = create_engine(f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{db}")
    wait_for_db(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def test_db(test_db_engine: Engine) -> Engine:
    """Provide the PostgreSQL test database, dropping the plugin tables afterwards."""
    yield test_db_engine

    with test_db_engine.begin() as conn:
        for table_name in ("player_balances", "player_homes", "players"):
            conn.execute(text(f"DROP TABLE IF EXISTS {table_name} CASCADE"))
