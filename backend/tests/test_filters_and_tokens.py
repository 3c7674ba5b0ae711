from embed_filter.domain.embed.filters import (
    TEXTFILTER_DISABLED,
    TEXTFILTER_OFF,
    TEXTFILTER_ON,
    is_enabled_globally,
    resolve_active_filters,
)
from embed_filter.domain.embed.models import CONTEXT_COURSE, CONTEXT_MODULE, Context
from embed_filter.domain.embed.tokens import is_authorized_token, token_for_question

from conftest import COURSE_CONTEXT, MODULE_CONTEXT


def test_global_enablement():
    assert is_enabled_globally(TEXTFILTER_ON)
    assert is_enabled_globally(TEXTFILTER_OFF)
    assert not is_enabled_globally(TEXTFILTER_DISABLED)
    assert not is_enabled_globally(None)


def test_local_override_cannot_enable_disabled_filter():
    active = resolve_active_filters(
        {"embedquestion": TEXTFILTER_DISABLED, "mathjax": TEXTFILTER_OFF},
        {10: {"embedquestion": TEXTFILTER_ON, "mathjax": TEXTFILTER_ON}},
        [1, 10],
    )
    assert active == {"mathjax": TEXTFILTER_ON}


def test_context_course_lookup():
    course = Context(id=10, contextlevel=CONTEXT_COURSE, instanceid=5, path="/1/10")
    module = Context(id=11, contextlevel=CONTEXT_MODULE, instanceid=7, path="/1/10/11", ancestors=[course])
    assert module.get_course_context() is course
    assert module.get_parent_context_ids() == [1, 10]


def test_context_repository_loads_ancestors(contexts):
    module = contexts.get_by_id(MODULE_CONTEXT)
    assert [c.id for c in module.ancestors] == [1, COURSE_CONTEXT]
    assert contexts.get_by_id(12345) is None


def test_token_round_trip():
    token = token_for_question(1, 5, "secret")
    assert is_authorized_token(token, 1, "5", "secret")
    assert not is_authorized_token(token, 1, 6, "secret")
    assert not is_authorized_token(token, 1, 5, "other")
    assert not is_authorized_token("", 1, 5, "secret")
