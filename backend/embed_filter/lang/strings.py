"""Localized string lookup with {$a} / {$a->field} placeholder substitution."""
from __future__ import annotations
import re
from typing import Any, Dict, Optional

from loguru import logger

from embed_filter.lang.en import STRINGS

_FIELD_PLACEHOLDER = re.compile(r"\{\$a->(\w+)\}")


class StringManager:
    def __init__(self, strings: Optional[Dict[str, Dict[str, str]]] = None):
        self._strings = strings if strings is not None else STRINGS

    def get_string(self, identifier: str, component: str = "core", a: Any = None) -> str:
        table = self._strings.get(component, {})
        if identifier not in table:
            logger.warning(f"Missing language string '{identifier}' in component '{component}'")
            return f"[[{identifier}]]"
        text = table[identifier]
        if a is None:
            return text
        if isinstance(a, dict):
            return _FIELD_PLACEHOLDER.sub(
                lambda m: str(a[m.group(1)]) if m.group(1) in a else m.group(0), text
            )
        return text.replace("{$a}", str(a))

    def string_exists(self, identifier: str, component: str = "core") -> bool:
        return identifier in self._strings.get(component, {})
