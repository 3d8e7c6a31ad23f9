from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _quietly(action, what: str) -> None:
    # cleanup after a failure must not replace the original error
    try:
        action()
    except mysql.connector.Error as e:
        logger.warning("%s failed: %s", what, e)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) for one unit of work.

    Commits when the block succeeds, rolls back otherwise. Driver errors are
    re-raised as StoreError carrying the driver message.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("store connection failed: %s", e)
        raise StoreError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            _quietly(cur.close, "cursor close")
    except mysql.connector.Error as e:
        _quietly(conn.rollback, "rollback")
        logger.error("store operation failed: %s", e)
        raise StoreError(str(e)) from e
    except Exception:
        _quietly(conn.rollback, "rollback")
        raise
    finally:
        _quietly(conn.close, "connection close")


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_float(value: Any) -> float:
    """DECIMAL columns come back as Decimal; services work in float."""

    if value is None:
        return 0.0
    return float(value)
