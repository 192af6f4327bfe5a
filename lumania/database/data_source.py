"""
Connection pool factory.

Builds a pooled SQLAlchemy engine from credentials kept in a plugin config
store. The store is expected to hold the flat keys Host, Port, Database, User
and Password (see resources/database.yml).
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import URL

from config.settings import config
from lumania.storage.config_store import ConfigStore

__all__ = ["build_database_url", "create_data_source"]


def build_database_url(store: ConfigStore, driver: Optional[str] = None) -> URL:
    """
    Build the database URL from the credentials in *store*.

    Args:
        store (ConfigStore): Store holding the credential keys
        driver (str, optional): SQLAlchemy driver name. If None, uses config.DB_DRIVER

    Returns:
        URL: <driver>://<User>:<Password>@<Host>:<Port>/<Database>
    """
    return URL.create(
        drivername=driver or config.DB_DRIVER,
        username=store.get_string("User"),
        password=store.get_string("Password"),
        host=store.get_string("Host"),
        # A missing port reads as 0; leave it to the driver default
        port=store.get_int("Port") or None,
        database=store.get_string("Database"),
    )


def create_data_source(store: ConfigStore, driver: Optional[str] = None) -> Engine:
    """
    Create a pooled SQLAlchemy engine from the credentials in *store*.

    Pool size, overflow, checkout timeout, pre-ping and the compiled statement
    cache size come from configuration. No connection is opened here.

    Args:
        store (ConfigStore): Store holding the credential keys
        driver (str, optional): SQLAlchemy driver name. If None, uses config.DB_DRIVER

    Returns:
        Engine: SQLAlchemy engine with its connection pool
    """
    return create_engine(build_database_url(store, driver), **config.get_engine_options())
