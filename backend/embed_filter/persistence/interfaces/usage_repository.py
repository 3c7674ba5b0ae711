"""Abstract repository interface for question usages."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from embed_filter.domain.embed.models import QuestionUsage


class UsageRepository(ABC):

    @abstractmethod
    def get_by_id(self, usage_id: int) -> Optional[QuestionUsage]:
        """Return the usage with its owning context loaded, or None."""
        ...
