"""Embed-question domain models — pure Python, no DB or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from embed_filter.domain.embed.errors import NotFoundError

CONTEXT_SYSTEM = 10
CONTEXT_USER = 30
CONTEXT_COURSECAT = 40
CONTEXT_COURSE = 50
CONTEXT_MODULE = 70
CONTEXT_BLOCK = 80


@dataclass
class Context:
    id: int
    contextlevel: int
    instanceid: int
    path: str = ""
    # Root first, not including this context
    ancestors: List["Context"] = field(default_factory=list)

    def get_course_context(self, strict: bool = True) -> Optional["Context"]:
        """Return the nearest enclosing course context, which may be this one."""
        if self.contextlevel == CONTEXT_COURSE:
            return self
        for parent in reversed(self.ancestors):
            if parent.contextlevel == CONTEXT_COURSE:
                return parent
        if strict:
            raise NotFoundError("coursecontextnotfound", f"Context {self.id} is not inside a course")
        return None

    def get_parent_context_ids(self) -> List[int]:
        return [int(p) for p in self.path.strip("/").split("/") if p][:-1]


@dataclass
class QuestionCategory:
    id: int
    name: str
    contextid: int
    info: str = ""
    idnumber: Optional[str] = None
    parent: int = 0


@dataclass
class Question:
    id: int
    category: int
    name: str
    questiontext: str = ""
    qtype: str = ""
    hidden: bool = False
    parent: int = 0
    createdby: Optional[int] = None
    idnumber: Optional[str] = None


@dataclass
class QuestionUsage:
    id: int
    context: Context
    component: str
    preferred_behaviour: str = ""

    def get_owning_context(self) -> Context:
        return self.context

    def get_owning_component(self) -> str:
        return self.component


@dataclass
class Behaviour:
    name: str
    display_name: str
    unused_display_options: List[str] = field(default_factory=list)
    archetypal: bool = True


@dataclass
class Actor:
    id: int
    username: str = ""
    role: str = "user"
