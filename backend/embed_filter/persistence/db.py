"""SQLite connection + schema initialisation."""
from __future__ import annotations
import os
import sqlite3
from datetime import datetime, timezone
from typing import Optional

import bcrypt
from loguru import logger

from embed_filter.core import config

_MIGRATIONS_DIR = os.path.join(os.path.dirname(__file__), "migrations")


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path or config.DATABASE_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    """Run all migration SQL files against the database."""
    path = db_path or config.DATABASE_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    conn = get_connection(path)
    for name in sorted(os.listdir(_MIGRATIONS_DIR)):
        if not name.endswith(".sql"):
            continue
        with open(os.path.join(_MIGRATIONS_DIR, name), "r", encoding="utf-8") as f:
            conn.executescript(f.read())
        logger.debug(f"Applied migration {name} to {path}")
    conn.commit()
    conn.close()
    _seed_default_user(path)


def _seed_default_user(db_path: str) -> None:
    """Insert a default admin user and its user context."""
    conn = get_connection(db_path)
    try:
        count = conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
        if count == 0:
            hashed = bcrypt.hashpw("admin".encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
            cur = conn.execute(
                """
                INSERT INTO users (username, password_hash, role, display_name, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                ("admin", hashed, "admin", "Administrator", datetime.now(timezone.utc).isoformat()),
            )
            user_id = cur.lastrowid
            ctx = conn.execute(
                "INSERT INTO context (contextlevel, instanceid, depth) VALUES (30, ?, 2)",
                (user_id,),
            )
            conn.execute("UPDATE context SET path = ? WHERE id = ?", (f"/1/{ctx.lastrowid}", ctx.lastrowid))
            conn.commit()
            logger.info("Seeded default admin user")
    finally:
        conn.close()
