"""
Shared test fixtures and configuration for the Lumania utilities test suite.

This file contains pytest fixtures that can be used across all test modules.
Fixtures defined here are automatically available to all test files.
"""

import logging
import os
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv
from sqlalchemy import create_engine, event

# Load test environment variables (if any)
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))


DEFAULT_CONFIG_YML = """\
Messages:
  Prefix: '&8[&bLumania&8] &7'
  Plain: Hello
Spawn:
  World: world
  X: 0.5
  Y: 64.0
  Z: 0.5
  Yaw: 90.0
  Pitch: 0.0
Settings:
  Debug: true
  AutoSaveMinutes: 10
  MaxBalance: 9000000000
  Ratio: 0.75
  Worlds:
  - world
  - world_nether
"""

DATABASE_YML = """\
Host: db.example.com
Port: 5432
Database: lumania
User: lumania
Password: secret
"""

SETUP_SQL = """\
-- test schema
CREATE TABLE homes (name VARCHAR(32) PRIMARY KEY, world VARCHAR(64));
INSERT INTO homes VALUES ('spawn', 'world');
"""


@pytest.fixture
def mock_logger():
    """Provide a logger double for capture-and-assert on failure reporting."""
    return Mock(spec=logging.Logger)


@pytest.fixture
def resource_dir(tmp_path):
    """
    Provide a directory of bundled resources.

    Contains a default config.yml, database.yml and setup.sql.
    """
    root = tmp_path / "resources"
    root.mkdir()
    (root / "config.yml").write_text(DEFAULT_CONFIG_YML, encoding="utf-8")
    (root / "database.yml").write_text(DATABASE_YML, encoding="utf-8")
    (root / "setup.sql").write_text(SETUP_SQL, encoding="utf-8")
    return root


@pytest.fixture
def resources(resource_dir):
    """Provide a ResourceBundle over the test resource directory."""
    from utils.resources import ResourceBundle

    return ResourceBundle(str(resource_dir))


@pytest.fixture
def data_folder(tmp_path):
    """Provide the host data folder the stores write into (not created yet)."""
    return str(tmp_path / "plugins" / "Lumania")


@pytest.fixture
def store(data_folder, resources, mock_logger):
    """Provide a ConfigStore opened on the bundled default config.yml."""
    from lumania.storage.config_store import ConfigStore

    return ConfigStore(data_folder, "config", resources, mock_logger)


@pytest.fixture
def empty_store(data_folder, resources, mock_logger):
    """Provide a ConfigStore with no bundled default and no backing file yet."""
    from lumania.storage.config_store import ConfigStore

    return ConfigStore(data_folder, "items", resources, mock_logger)


@pytest.fixture
def sqlite_engine(tmp_path):
    """
    Provide a SQLite engine with working SAVEPOINT support.

    pysqlite manages transactions itself by default, which breaks SAVEPOINT.
    The listeners hand transaction control back to SQLAlchemy.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    yield engine
    engine.dispose()
