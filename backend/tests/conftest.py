"""Shared fixtures: a seeded question bank in a temporary SQLite file."""
import pytest

from embed_filter.application.embed_helpers import EmbedHelpers
from embed_filter.core import config
from embed_filter.domain.embed.behaviours import BehaviourRegistry
from embed_filter.lang.strings import StringManager
from embed_filter.output.renderer import EmbedRenderer
from embed_filter.persistence.db import get_connection, init_db
from embed_filter.persistence.repositories.sqlite.sqlite_context_repository import SqliteContextRepository
from embed_filter.persistence.repositories.sqlite.sqlite_filter_settings_repository import SqliteFilterSettingsRepository
from embed_filter.persistence.repositories.sqlite.sqlite_question_bank_repository import SqliteQuestionBankRepository

# Context ids created by seed_question_bank
ADMIN_USER_CONTEXT = 2
COURSE_CONTEXT = 10
MODULE_CONTEXT = 11
COURSECAT_CONTEXT = 12
OTHER_USER_CONTEXT = 13
COURSE_ID = 5
OTHER_USER_ID = 99


def seed_question_bank(db_path: str) -> None:
    conn = get_connection(db_path)
    conn.executemany(
        "INSERT INTO context (id, contextlevel, instanceid, path, depth) VALUES (?, ?, ?, ?, ?)",
        [
            (COURSE_CONTEXT, 50, COURSE_ID, "/1/10", 2),
            (MODULE_CONTEXT, 70, 7, "/1/10/11", 3),
            (COURSECAT_CONTEXT, 40, 3, "/1/12", 2),
            (OTHER_USER_CONTEXT, 30, OTHER_USER_ID, "/1/13", 2),
        ],
    )
    conn.executemany(
        "INSERT INTO question_categories (id, name, contextid) VALUES (?, ?, ?)",
        [
            (1, "Shared & public", COURSE_CONTEXT),
            (2, "Empty", COURSE_CONTEXT),
            (3, "Elsewhere", COURSECAT_CONTEXT),
        ],
    )
    conn.executemany(
        """
        INSERT INTO question (id, category, parent, name, questiontext, qtype, hidden, createdby)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        [
            (1, 1, 0, "Beta", "What is 2 + 2?", "shortanswer", 0, 1),
            (2, 1, 0, "Alpha", "Hidden one", "shortanswer", 1, 1),
            (3, 1, 1, "Gamma", "Part of Beta", "shortanswer", 0, 1),
            (4, 3, 0, "Delta", "Somewhere else", "truefalse", 0, OTHER_USER_ID),
        ],
    )
    conn.executemany(
        "INSERT INTO question_usages (id, contextid, component, preferredbehaviour) VALUES (?, ?, ?, ?)",
        [
            (1, ADMIN_USER_CONTEXT, "filter_embedquestion", "interactive"),
            (2, ADMIN_USER_CONTEXT, "mod_quiz", "deferredfeedback"),
            (3, OTHER_USER_CONTEXT, "filter_embedquestion", "interactive"),
        ],
    )
    conn.commit()
    conn.close()


def set_filter_state(db_path: str, contextid: int, active: int, name: str = "embedquestion") -> None:
    conn = get_connection(db_path)
    conn.execute(
        "INSERT OR REPLACE INTO filter_active (filter, contextid, active) VALUES (?, ?, ?)",
        (name, contextid, active),
    )
    conn.commit()
    conn.close()


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = str(tmp_path / "embed.db")
    monkeypatch.setattr(config, "DATABASE_PATH", path)
    init_db(path)
    seed_question_bank(path)
    return path


@pytest.fixture
def contexts(db_path):
    return SqliteContextRepository(db_path)


@pytest.fixture
def helpers(db_path):
    strings = StringManager()
    return EmbedHelpers(
        questions=SqliteQuestionBankRepository(db_path),
        filter_settings=SqliteFilterSettingsRepository(db_path),
        strings=strings,
        renderer=EmbedRenderer(strings, "filter_embedquestion"),
        behaviours=BehaviourRegistry(),
    )
