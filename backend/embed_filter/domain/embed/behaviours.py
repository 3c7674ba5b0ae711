"""Registry of question behaviours and the display options each one leaves unused."""
from __future__ import annotations
from typing import Dict, Iterable, List

from embed_filter.domain.embed.models import Behaviour

_DEFERRED_UNUSED = ["correctness", "marks", "specificfeedback", "generalfeedback", "rightanswer"]

# Ordered by display name.
STANDARD_BEHAVIOURS: List[Behaviour] = [
    Behaviour("adaptive", "Adaptive mode"),
    Behaviour("adaptivenopenalty", "Adaptive mode (no penalties)"),
    Behaviour("deferredfeedback", "Deferred feedback", list(_DEFERRED_UNUSED)),
    Behaviour("deferredcbm", "Deferred feedback with CBM", list(_DEFERRED_UNUSED)),
    Behaviour("immediatefeedback", "Immediate feedback"),
    Behaviour("immediatecbm", "Immediate feedback with CBM"),
    Behaviour("informationitem", "Information item", archetypal=False),
    Behaviour("interactive", "Interactive with multiple tries"),
    Behaviour("manualgraded", "Manually graded", archetypal=False),
    Behaviour("missing", "Missing behaviour", archetypal=False),
]


class BehaviourRegistry:
    def __init__(self, behaviours: Iterable[Behaviour] = STANDARD_BEHAVIOURS, disabled: Iterable[str] = ()):
        self._behaviours: Dict[str, Behaviour] = {b.name: b for b in behaviours}
        self._disabled = set(disabled)

    def get_archetypal_behaviours(self) -> Dict[str, str]:
        """Enabled archetypal behaviours, name => display name, in registry order."""
        return {
            b.name: b.display_name
            for b in self._behaviours.values()
            if b.archetypal and b.name not in self._disabled
        }

    def get_behaviour_unused_display_options(self, name: str) -> List[str]:
        behaviour = self._behaviours.get(name)
        if behaviour is None:
            raise KeyError(f"Unknown question behaviour '{name}'")
        return list(behaviour.unused_display_options)
