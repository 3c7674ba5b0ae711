"""Abstract repository interface for question categories and questions."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from embed_filter.domain.embed.models import Question, QuestionCategory


class QuestionBankRepository(ABC):

    @abstractmethod
    def find_category_ids(self, categoryid) -> List[int]:
        """Return the ids of categories whose id equals categoryid (zero or one)."""
        ...

    @abstractmethod
    def get_sharable_question(self, categoryid, questionid) -> Optional[Question]:
        """
        Return the visible, top-level question in the category whose id matches
        questionid, or None. Raises StoreConsistencyError if several match.
        """
        ...

    @abstractmethod
    def list_categories_with_question_counts(self) -> List[Tuple[QuestionCategory, int]]:
        """Return every category that has questions, with its question count."""
        ...

    @abstractmethod
    def list_questions_in_category(self, categoryid) -> List[Question]:
        """Return all questions in a category ordered by name."""
        ...
