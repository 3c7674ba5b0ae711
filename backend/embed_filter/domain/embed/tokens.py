"""Tokens that authorise embedding a particular question."""
from __future__ import annotations
import hashlib
import hmac


def token_for_question(categoryid, questionid, secret: str) -> str:
    raw = f"{categoryid}/{questionid}#embed#{secret}"
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def is_authorized_token(token: str, categoryid, questionid, secret: str) -> bool:
    if not token:
        return False
    return hmac.compare_digest(token, token_for_question(categoryid, questionid, secret))
