"""SQLite implementation of ContextRepository."""
from __future__ import annotations
from typing import Optional

from embed_filter.domain.embed.errors import NotFoundError
from embed_filter.domain.embed.models import CONTEXT_SYSTEM, Context
from embed_filter.persistence.db import get_connection
from embed_filter.persistence.interfaces.context_repository import ContextRepository


def _row_to_context(row) -> Context:
    return Context(
        id=row["id"],
        contextlevel=row["contextlevel"],
        instanceid=row["instanceid"],
        path=row["path"] or "",
    )


class SqliteContextRepository(ContextRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def get_by_id(self, contextid: int) -> Optional[Context]:
        conn = get_connection(self._db_path)
        row = conn.execute("SELECT * FROM context WHERE id = ?", (contextid,)).fetchone()
        if not row:
            conn.close()
            return None
        context = _row_to_context(row)
        parent_ids = context.get_parent_context_ids()
        if parent_ids:
            placeholders = ", ".join("?" for _ in parent_ids)
            rows = conn.execute(
                f"SELECT * FROM context WHERE id IN ({placeholders})", parent_ids
            ).fetchall()
            by_id = {r["id"]: _row_to_context(r) for r in rows}
            context.ancestors = [by_id[i] for i in parent_ids if i in by_id]
        conn.close()
        return context

    def get_system_context(self) -> Context:
        conn = get_connection(self._db_path)
        row = conn.execute(
            "SELECT * FROM context WHERE contextlevel = ?", (CONTEXT_SYSTEM,)
        ).fetchone()
        conn.close()
        if not row:
            raise NotFoundError("invalidcontext", "The system context is missing")
        return _row_to_context(row)
