"""Course blocks loaded from a block database: grammar, listening and reading."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from linguacourse.constants import (
    EASY_PLAY_LIMIT,
    HARD_PLAY_LIMIT,
    Complexity,
    QuestionType,
)
from linguacourse.player import AudioPlayer
from linguacourse.questions import (
    OpenQuestion,
    OptionQuestion,
    Question,
    TrueFalseQuestion,
)
from linguacourse.task import Task


@dataclass(frozen=True)
class MainBlockInfo:
    """Header data of a block: its name, introduction, image and help text."""

    name: str
    intro: str
    image_path: str
    help: str


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _query(connection: sqlite3.Connection, sql: str) -> Iterator[dict[str, Any]]:
    cursor = connection.execute(sql)
    names = [column[0] for column in cursor.description or ()]
    for row in cursor:
        yield dict(zip(names, row))


def _first_row(connection: sqlite3.Connection, sql: str) -> dict[str, Any]:
    return next(_query(connection, sql), {})


def _to_str(value: Any) -> str:
    return "" if value is None else str(value)


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def _to_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() not in ("", "0", "false")


def _resolve(base_dir: str | os.PathLike[str], relative: str) -> str:
    return os.path.join(os.fspath(base_dir), relative)


def find_columns_by_keyword(
    connection: sqlite3.Connection, table_name: str, keyword: str
) -> list[str]:
    """Names of the columns of ``table_name`` containing ``keyword``, any case."""
    wanted = keyword.casefold()
    return [
        row["name"]
        for row in _query(connection, f"PRAGMA table_info({_quote(table_name)})")
        if wanted in row["name"].casefold()
    ]


def main_block_table_name(connection: sqlite3.Connection) -> str:
    """Name of the first table whose name contains "block"."""
    row = connection.execute(
        "SELECT name FROM sqlite_master "
        "WHERE type = 'table' AND name LIKE '%block%' LIMIT 1"
    ).fetchone()
    if row is None:
        raise LookupError("the database has no block table")
    return row[0]


def load_main_block_info(
    connection: sqlite3.Connection, base_dir: str | os.PathLike[str]
) -> MainBlockInfo:
    """Read the block header; the image path is resolved against ``base_dir``."""
    table = main_block_table_name(connection)
    row = _first_row(
        connection,
        "SELECT block_name, block_intro, image_path, block_help "
        f"FROM {_quote(table)} LIMIT 1",
    )
    return MainBlockInfo(
        name=_to_str(row.get("block_name")),
        intro=_to_str(row.get("block_intro")),
        image_path=_resolve(base_dir, _to_str(row.get("image_path"))),
        help=_to_str(row.get("block_help")),
    )


def load_task(
    connection: sqlite3.Connection, task_name: str, intro: str, table_name: str
) -> Task:
    """Build a task from the questions stored in ``table_name``.

    Rows of an unsupported question type are skipped.
    """
    option_columns: list[str] | None = None
    questions: list[Question] = []
    for row in _query(connection, f"SELECT * FROM {_quote(table_name)}"):
        question_id = _to_int(row.get("question_id"))
        number = _to_int(row.get("question_number"))
        text = _to_str(row.get("question_text"))
        value = _to_int(row.get("question_value"))
        prompt = f"{number}) {text}"
        try:
            question_type = QuestionType(_to_int(row.get("question_type")))
        except ValueError:
            continue

        if question_type is QuestionType.TRUE_FALSE_QUESTION:
            questions.append(
                TrueFalseQuestion(
                    prompt, question_id, value,
                    answer=_to_bool(row.get("correct_answer")),
                )
            )
        elif question_type is QuestionType.OPEN_QUESTION:
            questions.append(
                OpenQuestion(
                    prompt, question_id, value,
                    answer=_to_str(row.get("correct_answer")),
                )
            )
        elif question_type is QuestionType.OPTION_QUESTION:
            if option_columns is None:
                option_columns = find_columns_by_keyword(connection, table_name, "option")
            questions.append(
                OptionQuestion(
                    prompt, question_id, value,
                    options=[_to_str(row.get(column)) for column in option_columns],
                    correct_index=_to_int(row.get("correct_answer_index")),
                )
            )
    return Task(name=task_name, questions=questions, intro=intro)


def load_block_tasks(connection: sqlite3.Connection) -> list[Task]:
    """Load every task listed in the ``tasks`` table, in stored order."""
    return [
        load_task(
            connection,
            _to_str(row.get("task_name")),
            _to_str(row.get("task_intro")),
            _to_str(row.get("task_table_name")),
        )
        for row in _query(
            connection, "SELECT task_name, task_table_name, task_intro FROM tasks"
        )
    ]


class Block:
    """A course block: header information plus its tasks.

    The database stays open until :meth:`close` is called or the block is
    used as a context manager.
    """

    def __init__(
        self, database_path: str | os.PathLike[str], base_dir: str | os.PathLike[str] = ""
    ) -> None:
        self.connection = sqlite3.connect(os.fspath(database_path))
        try:
            self.info = load_main_block_info(self.connection, base_dir)
            self.tasks = load_block_tasks(self.connection)
        except Exception:
            self.connection.close()
            raise
        self.base_dir = base_dir
        self.help_visible = bool(self.info.help)

    @property
    def has_image(self) -> bool:
        """Whether the block's image file exists."""
        return os.path.isfile(self.info.image_path)

    def name(self) -> str:
        return self.info.name

    def value(self) -> int:
        """Maximum points the block can give."""
        return sum(task.value() for task in self.tasks)

    def score(self) -> int:
        """Points earned for the current responses."""
        return sum(task.score() for task in self.tasks)

    def close(self) -> None:
        """Close the block database."""
        self.connection.close()

    def __enter__(self) -> Block:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _main_table_value(self, column: str) -> str:
        table = main_block_table_name(self.connection)
        row = _first_row(self.connection, f"SELECT {_quote(column)} FROM {_quote(table)}")
        return _to_str(row.get(column))

    def _apply_complexity(self, complexity: Complexity) -> None:
        if complexity is Complexity.HARD:
            self.help_visible = False


class GrammarBlock(Block):
    """A block of grammar tasks; help is hidden on the hard level."""

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        complexity: Complexity,
        base_dir: str | os.PathLike[str] = "",
    ) -> None:
        super().__init__(database_path, base_dir)
        self._apply_complexity(Complexity(complexity))


class ListeningBlock(Block):
    """A block built around an audio recording with a limited number of plays."""

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        complexity: Complexity,
        base_dir: str | os.PathLike[str] = "",
        backend: Any = None,
    ) -> None:
        super().__init__(database_path, base_dir)
        complexity = Complexity(complexity)
        try:
            audio_path = _resolve(base_dir, self._main_table_value("audio_path"))
        except Exception:
            self.close()
            raise
        self.player = AudioPlayer(audio_path, backend)
        self.player.enable_pause(False)
        self.player.enable_seeking(False)
        if complexity is Complexity.EASY:
            self.player.set_play_limit(EASY_PLAY_LIMIT)
        elif complexity is Complexity.HARD:
            self.player.set_play_limit(HARD_PLAY_LIMIT)
        self._apply_complexity(complexity)


class ReadingBlock(Block):
    """A block built around a text to read."""

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        complexity: Complexity,
        base_dir: str | os.PathLike[str] = "",
    ) -> None:
        super().__init__(database_path, base_dir)
        try:
            self.text = self._main_table_value("text")
        except Exception:
            self.close()
            raise
        self._apply_complexity(Complexity(complexity))