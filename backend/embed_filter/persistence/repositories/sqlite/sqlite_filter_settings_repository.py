"""SQLite implementation of FilterSettingsRepository."""
from __future__ import annotations
from typing import Dict, List, Optional

from embed_filter.domain.embed.models import CONTEXT_SYSTEM
from embed_filter.persistence.db import get_connection
from embed_filter.persistence.interfaces.filter_settings_repository import FilterSettingsRepository


class SqliteFilterSettingsRepository(FilterSettingsRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def get_system_states(self) -> Dict[str, int]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT fa.filter, fa.active
            FROM filter_active fa
            JOIN context ctx ON ctx.id = fa.contextid
            WHERE ctx.contextlevel = ?
            """,
            (CONTEXT_SYSTEM,),
        ).fetchall()
        conn.close()
        return {r["filter"]: r["active"] for r in rows}

    def get_local_states(self, contextids: List[int]) -> Dict[int, Dict[str, int]]:
        if not contextids:
            return {}
        conn = get_connection(self._db_path)
        placeholders = ", ".join("?" for _ in contextids)
        rows = conn.execute(
            f"SELECT filter, contextid, active FROM filter_active WHERE contextid IN ({placeholders})",
            list(contextids),
        ).fetchall()
        conn.close()
        states: Dict[int, Dict[str, int]] = {}
        for r in rows:
            states.setdefault(r["contextid"], {})[r["filter"]] = r["active"]
        return states
