"""SQLite implementation of UsageRepository."""
from __future__ import annotations
from typing import Optional

from embed_filter.domain.embed.errors import NotFoundError
from embed_filter.domain.embed.models import QuestionUsage
from embed_filter.persistence.db import get_connection
from embed_filter.persistence.interfaces.context_repository import ContextRepository
from embed_filter.persistence.interfaces.usage_repository import UsageRepository


class SqliteUsageRepository(UsageRepository):

    def __init__(self, contexts: ContextRepository, db_path: Optional[str] = None):
        self._contexts = contexts
        self._db_path = db_path

    def get_by_id(self, usage_id: int) -> Optional[QuestionUsage]:
        conn = get_connection(self._db_path)
        row = conn.execute("SELECT * FROM question_usages WHERE id = ?", (usage_id,)).fetchone()
        conn.close()
        if not row:
            return None
        context = self._contexts.get_by_id(row["contextid"])
        if context is None:
            raise NotFoundError("invalidcontext", f"Usage {usage_id} has no owning context")
        return QuestionUsage(
            id=row["id"],
            context=context,
            component=row["component"],
            preferred_behaviour=row["preferredbehaviour"],
        )
