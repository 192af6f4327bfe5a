#!/usr/bin/env python3
"""
Database Setup Bootstrap

This script performs the database part of plugin startup: it opens the plugin's
database config (creating it from the bundled default on first run), builds the
connection pool from the stored credentials, and runs the bundled setup script.

Usage:
    python -m lumania.bootstrap
    python -m lumania.bootstrap --data-folder plugins/Lumania --script setup.sql

This will:
1. Open (or create) <data-folder>/database.yml
2. Create a pooled engine from Host, Port, Database, User and Password
3. Execute every statement of the setup script, isolating failures
4. Log a summary and dispose of the pool
"""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

# Load environment before the settings instance is created
load_dotenv()

from config.settings import config
from lumania.database.data_source import create_data_source
from lumania.database.sql_runner import BatchResult, BatchStatus, SQLScriptRunner
from lumania.storage.config_store import ConfigStore
from utils.logging import setup_plugin_logging
from utils.resources import ResourceBundle

__all__ = ["run_database_setup", "main"]


def run_database_setup(
    data_folder: str,
    resources: ResourceBundle,
    logger: logging.Logger,
    script: str | None = None,
) -> BatchResult:
    """
    Run the bundled setup script against the database configured in the data folder.

    Args:
        data_folder (str): Host data folder holding database.yml
        resources (ResourceBundle): Bundle providing database.yml and the script
        logger (logging.Logger): Logger passed to every component
        script (str, optional): Script resource name. If None, uses config.SETUP_SCRIPT

    Returns:
        BatchResult: Outcome of the batch
    """
    store = ConfigStore(data_folder, config.DATABASE_CONFIG, resources, logger)
    engine = create_data_source(store)
    try:
        runner = SQLScriptRunner(resources, logger)
        return runner.execute_batch(script or config.SETUP_SCRIPT, engine)
    finally:
        engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """
    Main function for the bootstrap script.

    Returns:
        int: Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="Run the Lumania database setup script",
    )
    parser.add_argument(
        "--data-folder",
        default=config.DATA_FOLDER,
        help="Plugin data folder holding database.yml (default: %(default)s)",
    )
    parser.add_argument(
        "--resource-dir",
        default=config.RESOURCE_DIR,
        help="Directory of bundled default resources (default: %(default)s)",
    )
    parser.add_argument(
        "--script",
        default=config.SETUP_SCRIPT,
        help="Setup script resource name (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logger = setup_plugin_logging(args.log_level)
    logger.info("Starting database setup...")

    result = run_database_setup(
        args.data_folder, ResourceBundle(args.resource_dir), logger, args.script
    )

    if result.status is BatchStatus.RESOURCE_ABSENT:
        logger.info(f"No setup script '{result.resource_name}' bundled, nothing to do")
        return 0
    if result.status is not BatchStatus.COMPLETED:
        logger.error(f"❌ Database setup failed: {result.status.value}")
        return 1

    if result.failed:
        logger.warning(
            f"⚠️  {len(result.failed)} of {result.attempted} setup statements failed"
        )
    else:
        logger.info(f"✅ Database setup completed: {result.attempted} statements")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
