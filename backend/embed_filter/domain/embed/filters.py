"""Rules for working out which text filters apply in a context."""
from __future__ import annotations
from typing import Dict, List, Mapping, Optional

TEXTFILTER_ON = 1
TEXTFILTER_OFF = -1
TEXTFILTER_DISABLED = -9999


def is_enabled_globally(system_state: Optional[int]) -> bool:
    """A filter is enabled site-wide unless it is missing or disabled at system level."""
    return system_state is not None and system_state != TEXTFILTER_DISABLED


def resolve_active_filters(
    system_states: Mapping[str, int],
    local_states: Mapping[int, Mapping[str, int]],
    path_ids: List[int],
) -> Dict[str, int]:
    """
    Start from the system-level states, then apply the local ON/OFF overrides
    of each context on the path, root first. Returns filter => TEXTFILTER_ON for
    every filter that ends up on.
    """
    states = {f: s for f, s in system_states.items() if is_enabled_globally(s)}
    for contextid in path_ids:
        for name, state in local_states.get(contextid, {}).items():
            if name in states and state in (TEXTFILTER_ON, TEXTFILTER_OFF):
                states[name] = state
    return {name: TEXTFILTER_ON for name, state in states.items() if state == TEXTFILTER_ON}
