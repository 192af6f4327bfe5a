"""
SQL Setup Script Runner

This module executes bundled SQL scripts (table creation, seed data) against a
pooled database connection at plugin startup.

Key Features:
- Statement splitting that respects quotes, comments and dollar-quoted bodies
- One connection and one transaction per batch, committed explicitly
- Per-statement isolation: each statement runs inside its own SAVEPOINT, so a
  failing statement is logged and rolled back while the batch continues
- Missing scripts are a named no-op outcome, not an error

Example Usage:
    runner = SQLScriptRunner(resources, logger)
    result = runner.execute_batch("setup.sql", engine)
    if result.failed:
        logger.warning(f"{len(result.failed)} setup statements failed")
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from utils.resources import ResourceBundle

__all__ = ["BatchStatus", "BatchResult", "SQLScriptRunner", "split_statements"]

_DOLLAR_TAG = re.compile(r"\$(?:[A-Za-z_][A-Za-z_0-9]*)?\$")


def _skip_quoted(sql: str, start: int, quote: str) -> int:
    """Return the index just past the quoted literal opening at *start*."""
    i = start + 1
    while i < len(sql):
        if sql[i] == quote:
            # A doubled quote is an escaped quote inside the literal
            if i + 1 < len(sql) and sql[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    return len(sql)


def split_statements(sql: str) -> list[str]:
    """
    Split a script into statements on ';' outside literals and comments.

    Semicolons inside '...', "..." and `...` literals, -- line comments,
    /* */ block comments and $tag$ ... $tag$ bodies do not end a statement.
    Comments are kept verbatim. Statements that are empty or contain only
    comments are dropped, and the rest are stripped of surrounding whitespace.

    Args:
        sql (str): Script text

    Returns:
        list[str]: Statements in script order
    """
    statements: list[str] = []
    start = 0
    has_code = False
    i = 0
    n = len(sql)

    while i < n:
        ch = sql[i]
        if ch in ("'", '"', "`"):
            i = _skip_quoted(sql, i, ch)
            has_code = True
        elif sql.startswith("--", i):
            end = sql.find("\n", i)
            i = n if end == -1 else end + 1
        elif sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            i = n if end == -1 else end + 2
        elif ch == "$" and _DOLLAR_TAG.match(sql, i):
            tag = _DOLLAR_TAG.match(sql, i).group(0)
            end = sql.find(tag, i + len(tag))
            i = n if end == -1 else end + len(tag)
            has_code = True
        elif ch == ";":
            if has_code:
                statements.append(sql[start:i].strip())
            start = i + 1
            has_code = False
            i += 1
        else:
            if not ch.isspace():
                has_code = True
            i += 1

    if has_code:
        statements.append(sql[start:].strip())
    return statements


class BatchStatus(Enum):
    """Overall outcome of a batch run."""

    COMPLETED = "completed"
    RESOURCE_ABSENT = "resource_absent"
    READ_FAILED = "read_failed"
    CONNECTION_FAILED = "connection_failed"
    TRANSACTION_FAILED = "transaction_failed"


class BatchResult(BaseModel):
    """Statements run by one batch and how the batch ended."""

    resource_name: str
    status: BatchStatus
    executed: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.executed) + len(self.failed)

    @property
    def ok(self) -> bool:
        """True when the batch committed and every statement succeeded."""
        return self.status is BatchStatus.COMPLETED and not self.failed


class SQLScriptRunner:
    """
    Execute bundled SQL scripts with per-statement failure isolation.

    The runner blocks for the whole batch. Connection checkout waits are
    bounded only by the pool's own timeout.
    """

    def __init__(
        self, resources: ResourceBundle, logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the runner.

        Args:
            resources (ResourceBundle): Bundle the scripts are read from
            logger (Optional[logging.Logger]): Logger for failure reporting.
                                             If None, uses the module logger.
        """
        self.resources = resources
        self.logger = logger or logging.getLogger(__name__)

    def execute_batch(self, resource_name: str, engine: Engine) -> BatchResult:
        """
        Run every statement of a bundled script on one pooled connection.

        Args:
            resource_name (str): Name of the script in the resource bundle
            engine (Engine): SQLAlchemy engine providing the connection pool

        Returns:
            BatchResult: Executed and failed statements plus the batch status
        """
        try:
            sql = self.resources.get_resource(resource_name)
        except OSError as e:
            self.logger.error(f"Error while reading '{resource_name}': {e}")
            return BatchResult(
                resource_name=resource_name, status=BatchStatus.READ_FAILED
            )

        if sql is None:
            self.logger.debug(f"No bundled script named '{resource_name}', skipping")
            return BatchResult(
                resource_name=resource_name, status=BatchStatus.RESOURCE_ABSENT
            )

        statements = split_statements(sql)

        try:
            conn = engine.connect()
        except SQLAlchemyError as e:
            self.logger.error(f"Error while creating connection: {e}")
            return BatchResult(
                resource_name=resource_name, status=BatchStatus.CONNECTION_FAILED
            )

        result = BatchResult(resource_name=resource_name, status=BatchStatus.COMPLETED)
        with conn:
            try:
                with conn.begin():
                    for statement in statements:
                        self._execute_isolated(conn, statement, result)
            except SQLAlchemyError as e:
                self.logger.error(
                    f"Error while committing '{resource_name}', batch rolled back: {e}"
                )
                result.status = BatchStatus.TRANSACTION_FAILED

        self.logger.info(
            f"Executed '{resource_name}': {len(result.executed)} succeeded, "
            f"{len(result.failed)} failed"
        )
        return result

    def _execute_isolated(self, conn, statement: str, result: BatchResult) -> None:
        """Execute one statement inside a SAVEPOINT, recording the outcome."""
        try:
            with conn.begin_nested():
                conn.exec_driver_sql(statement)
        except SQLAlchemyError as e:
            self.logger.error(f"Error while executing query: '{statement}': {e}")
            result.failed.append(statement)
        else:
            result.executed.append(statement)
