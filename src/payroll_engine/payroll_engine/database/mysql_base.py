from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import datetime, time, timedelta
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..core.exceptions import ValidationError


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Borrow a connection for one unit of work: commit on success, roll back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def load_json(value: Any, *, field_name: str = "settings") -> Dict[str, Any]:
    """Decode a MySQL JSON column (returned as str, bytes or already a dict)."""
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    try:
        decoded = json.loads(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} is not valid JSON") from exc
    if not isinstance(decoded, dict):
        raise ValidationError(f"{field_name} must be a JSON object")
    return decoded


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Punch times come back as time, timedelta (the C extension) or 'HH:MM:SS' strings."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return (datetime.min + timedelta(seconds=seconds)).time()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii")
    if isinstance(value, str):
        try:
            return time.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError(f"Invalid MySQL TIME value: {value!r}") from exc
    raise ValidationError(f"Unsupported MySQL TIME value type: {type(value).__name__}")
