"""Embed-question filter API endpoints."""
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from loguru import logger

from embed_filter.api.auth import get_current_actor
from embed_filter.application.embed_helpers import Choices, EmbedHelpers
from embed_filter.container import get_context_repo, get_embed_helpers, get_renderer, get_string_manager, get_usage_repo
from embed_filter.core import config
from embed_filter.domain.embed.errors import NotYourAttemptError, StoreConsistencyError
from embed_filter.domain.embed.models import Actor, Context, Question
from embed_filter.domain.embed.tokens import is_authorized_token
from embed_filter.output.renderer import EmbedRenderer, OutputBuffer
from embed_filter.persistence.interfaces.context_repository import ContextRepository
from embed_filter.persistence.interfaces.usage_repository import UsageRepository

router = APIRouter(tags=["embed"])


# ------------------------------------------------------------------
# Serializers
# ------------------------------------------------------------------
def _serialize_choices(choices: Choices) -> list:
    return [{"value": str(value), "label": label} for value, label in choices.items()]


def _serialize_question(q: Question) -> dict:
    return {
        "id": q.id,
        "category": q.category,
        "name": q.name,
        "questiontext": q.questiontext,
        "qtype": q.qtype,
        "idnumber": q.idnumber,
    }


def _load_context(contextid: int, contexts: ContextRepository) -> Context:
    context = contexts.get_by_id(contextid)
    if context is None:
        raise HTTPException(status_code=404, detail=f"Context {contextid} not found")
    return context


# ------------------------------------------------------------------
# Health check
# ------------------------------------------------------------------
@router.get("/health")
def health():
    return {"status": "ok"}


# ------------------------------------------------------------------
# Context endpoints
# ------------------------------------------------------------------
@router.get("/contexts/{contextid}/filter-warnings")
def filter_warnings(
    contextid: int,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    contexts: ContextRepository = Depends(get_context_repo),
):
    output = OutputBuffer()
    helpers.warn_if_filter_disabled(_load_context(contextid, contexts), output)
    return {"html": output.getvalue()}


@router.get("/contexts/{contextid}/relevant-course")
def relevant_course(
    contextid: int,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    contexts: ContextRepository = Depends(get_context_repo),
):
    return {"courseid": helpers.get_relevant_courseid(_load_context(contextid, contexts))}


@router.get("/contexts/{contextid}/categories/{categoryid}")
def category_by_idnumber(
    contextid: int,
    categoryid: str,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    contexts: ContextRepository = Depends(get_context_repo),
):
    return {"ids": helpers.get_category_by_idnumber(_load_context(contextid, contexts), categoryid)}


@router.get("/contexts/{contextid}/category-choices")
def category_choices(
    contextid: int,
    userid: Optional[int] = None,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    contexts: ContextRepository = Depends(get_context_repo),
):
    context = _load_context(contextid, contexts)
    return _serialize_choices(helpers.get_categories_with_sharable_question_choices(context, userid))


# ------------------------------------------------------------------
# Question endpoints
# ------------------------------------------------------------------
@router.get("/categories/{categoryid}/question-choices")
def question_choices(
    categoryid: int,
    userid: Optional[int] = None,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
):
    return _serialize_choices(helpers.get_sharable_question_choices(categoryid, userid))


def _find_question(helpers: EmbedHelpers, categoryid: int, questionid: str) -> Optional[Question]:
    try:
        return helpers.get_question_by_idnumber(categoryid, questionid)
    except StoreConsistencyError as e:
        logger.error(f"Question lookup is ambiguous: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/categories/{categoryid}/questions/{questionid}")
def question_by_idnumber(
    categoryid: int,
    questionid: str,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
):
    question = _find_question(helpers, categoryid, questionid)
    if question is None:
        raise HTTPException(
            status_code=404,
            detail=get_string_manager().get_string("errorunknownquestion", config.FILTER_COMPONENT),
        )
    return _serialize_question(question)


@router.get("/behaviours")
def behaviours(helpers: EmbedHelpers = Depends(get_embed_helpers)):
    return helpers.behaviour_choices()


# ------------------------------------------------------------------
# Attempt endpoints
# ------------------------------------------------------------------
@router.get("/usages/{usage_id}/verify")
def verify_usage(
    usage_id: int,
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    usages: UsageRepository = Depends(get_usage_repo),
    actor: Actor = Depends(get_current_actor),
):
    usage = usages.get_by_id(usage_id)
    if usage is None:
        raise HTTPException(status_code=404, detail=f"Usage {usage_id} not found")
    try:
        helpers.verify_usage(usage, actor)
    except NotYourAttemptError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return {"verified": True}


@router.get("/showquestion", response_class=HTMLResponse)
def show_question(
    catid: int,
    qid: str,
    token: str = "",
    helpers: EmbedHelpers = Depends(get_embed_helpers),
    renderer: EmbedRenderer = Depends(get_renderer),
):
    """The page loaded inside the embed iframe."""
    if not is_authorized_token(token, catid, qid, config.SECRET_KEY):
        terminate = helpers.filter_error("invalidtoken")
        return HTMLResponse(terminate.body, status_code=terminate.status_code)

    question = _find_question(helpers, catid, qid)
    if question is None:
        terminate = helpers.filter_error("errorunknownquestion")
        return HTMLResponse(terminate.body, status_code=terminate.status_code)

    return HTMLResponse(renderer.header() + renderer.question(question.name, question.questiontext) + renderer.footer())
