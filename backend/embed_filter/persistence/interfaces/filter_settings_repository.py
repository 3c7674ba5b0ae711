"""Abstract repository interface for per-context text filter settings."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List


class FilterSettingsRepository(ABC):

    @abstractmethod
    def get_system_states(self) -> Dict[str, int]:
        """Return filter name => state at the system context."""
        ...

    @abstractmethod
    def get_local_states(self, contextids: List[int]) -> Dict[int, Dict[str, int]]:
        """Return contextid => (filter name => ON/OFF override) for the given contexts."""
        ...
