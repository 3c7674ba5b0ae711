"""Dependency injection container — wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from embed_filter.application.embed_helpers import EmbedHelpers
from embed_filter.core import config
from embed_filter.domain.embed.behaviours import BehaviourRegistry
from embed_filter.lang.strings import StringManager
from embed_filter.output.renderer import EmbedRenderer
from embed_filter.persistence.repositories.sqlite.sqlite_context_repository import SqliteContextRepository
from embed_filter.persistence.repositories.sqlite.sqlite_filter_settings_repository import SqliteFilterSettingsRepository
from embed_filter.persistence.repositories.sqlite.sqlite_question_bank_repository import SqliteQuestionBankRepository
from embed_filter.persistence.repositories.sqlite.sqlite_usage_repository import SqliteUsageRepository


@lru_cache(maxsize=1)
def get_context_repo() -> SqliteContextRepository:
    return SqliteContextRepository()


@lru_cache(maxsize=1)
def get_usage_repo() -> SqliteUsageRepository:
    return SqliteUsageRepository(contexts=get_context_repo())


@lru_cache(maxsize=1)
def get_string_manager() -> StringManager:
    return StringManager()


@lru_cache(maxsize=1)
def get_renderer() -> EmbedRenderer:
    return EmbedRenderer(get_string_manager(), config.FILTER_COMPONENT)


@lru_cache(maxsize=1)
def get_embed_helpers() -> EmbedHelpers:
    return EmbedHelpers(
        questions=SqliteQuestionBankRepository(),
        filter_settings=SqliteFilterSettingsRepository(),
        strings=get_string_manager(),
        renderer=get_renderer(),
        behaviours=BehaviourRegistry(disabled=config.DISABLED_BEHAVIOURS),
        filter_name=config.FILTER_NAME,
        component=config.FILTER_COMPONENT,
        site_id=config.SITE_ID,
    )
