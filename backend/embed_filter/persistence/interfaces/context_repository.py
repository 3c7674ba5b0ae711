"""Abstract repository interface for contexts."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from embed_filter.domain.embed.models import Context


class ContextRepository(ABC):

    @abstractmethod
    def get_by_id(self, contextid: int) -> Optional[Context]:
        """Return the Context with its ancestors loaded, or None."""
        ...

    @abstractmethod
    def get_system_context(self) -> Context:
        """Return the single site-level context."""
        ...
