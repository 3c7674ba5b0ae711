"""SQLite implementation of QuestionBankRepository."""
from __future__ import annotations
from typing import List, Optional, Tuple

from embed_filter.domain.embed.errors import StoreConsistencyError
from embed_filter.domain.embed.models import Question, QuestionCategory
from embed_filter.persistence.db import get_connection
from embed_filter.persistence.interfaces.question_bank_repository import QuestionBankRepository


def sql_like_escape(text, escape_char: str = "\\") -> str:
    text = str(text)
    return (
        text.replace(escape_char, escape_char * 2)
        .replace("_", escape_char + "_")
        .replace("%", escape_char + "%")
    )


def _row_to_question(row) -> Question:
    return Question(
        id=row["id"],
        category=row["category"],
        name=row["name"],
        questiontext=row["questiontext"],
        qtype=row["qtype"],
        hidden=bool(row["hidden"]),
        parent=row["parent"],
        createdby=row["createdby"],
        idnumber=row["idnumber"],
    )


def _row_to_category(row) -> QuestionCategory:
    return QuestionCategory(
        id=row["id"],
        name=row["name"],
        contextid=row["contextid"],
        info=row["info"],
        idnumber=row["idnumber"],
        parent=row["parent"],
    )


class SqliteQuestionBankRepository(QuestionBankRepository):

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path

    def find_category_ids(self, categoryid) -> List[int]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            "SELECT qc.id FROM question_categories qc WHERE qc.id = ?", (categoryid,)
        ).fetchall()
        conn.close()
        return [r["id"] for r in rows]

    def get_sharable_question(self, categoryid, questionid) -> Optional[Question]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT * FROM question
            WHERE category = ? AND id LIKE ? ESCAPE '\\' AND hidden = 0 AND parent = 0
            """,
            (categoryid, sql_like_escape(questionid)),
        ).fetchall()
        conn.close()
        if len(rows) > 1:
            raise StoreConsistencyError(
                "multiplerecordsfound",
                f"Found {len(rows)} questions matching '{questionid}' in category {categoryid}",
            )
        return _row_to_question(rows[0]) if rows else None

    def list_categories_with_question_counts(self) -> List[Tuple[QuestionCategory, int]]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT qc.*, COUNT(q.id) AS question_count
            FROM question_categories qc
            JOIN question q ON q.category = qc.id
            GROUP BY qc.id
            """
        ).fetchall()
        conn.close()
        return [(_row_to_category(r), r["question_count"]) for r in rows]

    def list_questions_in_category(self, categoryid) -> List[Question]:
        conn = get_connection(self._db_path)
        rows = conn.execute(
            """
            SELECT q.*
            FROM question q
            JOIN question_categories qc ON q.category = qc.id
            WHERE qc.id = ?
            ORDER BY q.name
            """,
            (categoryid,),
        ).fetchall()
        conn.close()
        return [_row_to_question(r) for r in rows]
