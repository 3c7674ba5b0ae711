"""HTML output for the embed filter pages."""
from __future__ import annotations
import html
from dataclasses import dataclass, field
from typing import List

from embed_filter.lang.strings import StringManager


def format_string(text: str) -> str:
    """Make a stored name safe to show inside HTML."""
    return html.escape(text or "")


@dataclass
class ErrorMessage:
    """Renderable error, identified by a language string key."""
    string: str


@dataclass
class TerminateResponse:
    """The finished response. Whoever receives one must send it and stop."""
    body: str
    status_code: int = 200


@dataclass
class OutputBuffer:
    """Collects markup fragments written during a request."""
    fragments: List[str] = field(default_factory=list)

    def write(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def getvalue(self) -> str:
        return "".join(self.fragments)


class EmbedRenderer:
    def __init__(self, strings: StringManager, component: str):
        self._strings = strings
        self._component = component

    def header(self) -> str:
        title = format_string(self._strings.get_string("iframetitle", self._component))
        return (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{title}</title>\n</head>\n<body class=\"{self._component}\">\n"
        )

    def footer(self) -> str:
        return "</body>\n</html>\n"

    def notification(self, message: str, kind: str = "danger") -> str:
        return f"<div class=\"alert alert-{kind}\" role=\"alert\">{format_string(message)}</div>\n"

    def render(self, renderable: ErrorMessage) -> str:
        message = self._strings.get_string(renderable.string, self._component)
        return f"<div class=\"{self._component}-error\">{self.notification(message)}</div>\n"

    def question(self, name: str, questiontext: str) -> str:
        return (
            f"<div class=\"que\"><h2 class=\"qn\">{format_string(name)}</h2>\n"
            f"<div class=\"qtext\">{format_string(questiontext)}</div></div>\n"
        )
