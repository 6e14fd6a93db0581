from __future__ import annotations

import math
import os
import sqlite3
import threading
import time

from app.core.config import settings

_conn: sqlite3.Connection | None = None
_conn_lock = threading.Lock()


class EndpointRateLimitExceeded(Exception):
    def __init__(self, retry_after_seconds: int) -> None:
        super().__init__(f"Rate limit exceeded. Try again in {retry_after_seconds}s.")
        self.retry_after_seconds = retry_after_seconds


def _get_connection() -> sqlite3.Connection:
    global _conn
    with _conn_lock:
        if _conn is not None:
            return _conn

        db_path = settings.endpoint_rate_limit_db_path
        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        _conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        _conn.execute("PRAGMA journal_mode=WAL;")
        _conn.execute("PRAGMA synchronous=NORMAL;")
        _conn.execute("PRAGMA busy_timeout=5000;")
        _conn.execute(
            """
            CREATE TABLE IF NOT EXISTS endpoint_rate_limit_events (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                client_key TEXT NOT NULL,
                route_key TEXT NOT NULL,
                created_at REAL NOT NULL
            );
            """
        )
        _conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_endpoint_rate_limit_lookup
            ON endpoint_rate_limit_events (client_key, route_key, created_at);
            """
        )
        return _conn


def init_endpoint_rate_limit() -> None:
    _get_connection()


def enforce_endpoint_rate_limit(client_key: str, route_key: str, limit: int, window_seconds: int = 60) -> None:
    """Record a hit for (client, route) or raise once the sliding window is full."""
    now = time.time()
    cutoff = now - window_seconds
    conn = _get_connection()

    with _conn_lock:
        cursor = conn.cursor()
        cursor.execute("BEGIN IMMEDIATE")
        try:
            cursor.execute("DELETE FROM endpoint_rate_limit_events WHERE created_at < ?", (cutoff,))
            cursor.execute(
                """
                SELECT COUNT(1), MIN(created_at)
                FROM endpoint_rate_limit_events
                WHERE client_key = ? AND route_key = ? AND created_at >= ?
                """,
                (client_key, route_key, cutoff),
            )
            row = cursor.fetchone()
            count = int(row[0] or 0)
            if count >= limit:
                earliest = float(row[1] if row[1] is not None else now)
                retry_after = max(1, math.ceil(earliest + window_seconds - now))
                conn.rollback()
                raise EndpointRateLimitExceeded(retry_after)

            cursor.execute(
                """
                INSERT INTO endpoint_rate_limit_events (client_key, route_key, created_at)
                VALUES (?, ?, ?)
                """,
                (client_key, route_key, now),
            )
            conn.commit()
        except EndpointRateLimitExceeded:
            raise
        except Exception:
            conn.rollback()
            raise


def clear_endpoint_rate_limit_events() -> None:
    conn = _get_connection()
    with _conn_lock:
        conn.execute("DELETE FROM endpoint_rate_limit_events")
        conn.commit()
