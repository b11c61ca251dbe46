"""Database helpers for reading PHI notes and writing their properties.

The corpus tree lives in ``text_node``; each node carries name/value rows in
``text_node_property``. Notes are the properties named ``note``.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Iterator

from note_parsing import props
from note_parsing.text_node_property import TextNodeProperty

# psycopg2 is only required for DB IO (not for parsing or unit tests).
try:
    import psycopg2  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    psycopg2 = None


def _require_psycopg2():
    if psycopg2 is None:  # pragma: no cover
        raise RuntimeError(
            "psycopg2 is required for database operations. "
            "Install the psycopg2-binary package in your environment."
        )


NODE_TABLE = "text_node"
PROPERTY_TABLE = "text_node_property"
NOTE_PROPERTY = "note"

DEFAULT_CORPUS = os.getenv("NOTE_CORPUS", "packhum")
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": os.getenv("DB_PORT", "5432"),
    "database": os.getenv("DB_NAME", "epicod"),
    "user": os.getenv("DB_USER", "postgres"),
    "password": os.getenv("DB_PASSWORD", "postgres"),
}

# names deleted before a re-run, besides the (possibly suffixed) date-txt/date-val
_CLEARED_NAMES = tuple(n for n in props.INJECTED_NAMES if n not in props.SUFFIXED_NAMES)

logger = logging.getLogger(__name__)


def connect_db(max_retries: int = 5, retry_delay: int = 5):
    """Connect to the database with retry logic."""
    _require_psycopg2()

    for attempt in range(max_retries):
        try:
            conn = psycopg2.connect(**DB_CONFIG)
            logger.info(f"Successfully connected to database at {DB_CONFIG['host']}")
            return conn
        except psycopg2.OperationalError:
            if attempt < max_retries - 1:
                logger.error(
                    f"DB connection attempt {attempt + 1} failed. Retrying in {retry_delay} seconds..."
                )
                time.sleep(retry_delay)
            else:
                logger.error(f"Failed to connect to database after {max_retries} attempts")
                raise


def clear_injected_props(conn, corpus: str = DEFAULT_CORPUS, commit: bool = True) -> int:
    """Delete the properties a previous injection added to the nodes of corpus.

    With commit False the deletion is left pending in the caller's transaction.

    Returns:
        The number of deleted rows
    """
    like_clauses = " OR ".join("tp.name LIKE %s" for _ in props.SUFFIXED_NAMES)
    sql = f"""
        DELETE FROM {PROPERTY_TABLE}
        WHERE id IN (
            SELECT tp.id FROM {PROPERTY_TABLE} AS tp
            JOIN {NODE_TABLE} AS tn ON tn.id = tp.node_id
            WHERE tn.corpus = %s
              AND ({like_clauses} OR tp.name = ANY(%s))
        )
    """
    params = (corpus, *(f"{name}%" for name in props.SUFFIXED_NAMES), list(_CLEARED_NAMES))

    cur = conn.cursor()
    try:
        cur.execute(sql, params)
        deleted = cur.rowcount
        if commit:
            conn.commit()
        logger.info(f"Cleared {deleted} injected properties of corpus {corpus}")
        return deleted
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()


def count_notes(conn, corpus: str = DEFAULT_CORPUS) -> int:
    cur = conn.cursor()
    try:
        cur.execute(
            f"""
            SELECT COUNT(*) FROM {PROPERTY_TABLE} AS tp
            JOIN {NODE_TABLE} AS tn ON tn.id = tp.node_id
            WHERE tn.corpus = %s AND tp.name = %s
            """,
            (corpus, NOTE_PROPERTY),
        )
        row = cur.fetchone()
        return row[0] if row else 0
    finally:
        cur.close()


def iter_notes(conn, corpus: str = DEFAULT_CORPUS) -> Iterator[tuple[int, str]]:
    """Yield (node id, note) for every note of corpus, ordered by node id."""
    cur = conn.cursor()
    try:
        cur.execute(
            f"""
            SELECT tn.id, tp.value FROM {PROPERTY_TABLE} AS tp
            JOIN {NODE_TABLE} AS tn ON tn.id = tp.node_id
            WHERE tn.corpus = %s AND tp.name = %s
            ORDER BY tn.id, tp.id
            """,
            (corpus, NOTE_PROPERTY),
        )
        for node_id, note in cur.fetchall():
            yield node_id, note
    finally:
        cur.close()


def insert_props(conn, properties: list[TextNodeProperty], commit: bool = True) -> int:
    """Insert properties in their given order and return how many were written.

    With commit False the rows are left pending in the caller's transaction.
    """
    if not properties:
        return 0

    cur = conn.cursor()
    try:
        cur.executemany(
            f"INSERT INTO {PROPERTY_TABLE} (node_id, name, value, type) VALUES (%s, %s, %s, %s)",
            [(p.node_id, p.name, p.value, p.type) for p in properties],
        )
        if commit:
            conn.commit()
        return len(properties)
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
