"""Errors raised by the embed-question helpers."""
from __future__ import annotations


class EmbedQuestionError(Exception):
    """Base class. ``errorcode`` is the language string key for the message."""

    def __init__(self, errorcode: str, message: str = ""):
        super().__init__(message or errorcode)
        self.errorcode = errorcode


class NotYourAttemptError(EmbedQuestionError, PermissionError):
    """The question usage belongs to someone else, or to another component."""


class StoreConsistencyError(EmbedQuestionError):
    """A lookup that expects at most one row found several."""


class NotFoundError(EmbedQuestionError):
    """A record that must exist does not."""
