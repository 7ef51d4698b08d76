from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DataAccessError, DuplicateRecordError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, rollback on error.

    Driver errors are re-raised as ``DataAccessError`` so services never see
    mysql-connector types.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Cannot connect to database: %s", e)
        raise DataAccessError("Database is unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise DuplicateRecordError(str(e)) from e
        raise DataAccessError(str(e)) from e
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Database error: %s", e)
        raise DataAccessError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
