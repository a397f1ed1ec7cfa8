"""A course: an introduction page followed by blocks, with an optional time limit."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from linguacourse.blocks import (
    Block,
    GrammarBlock,
    ListeningBlock,
    ReadingBlock,
    _first_row,
    _query,
    _resolve,
    _to_int,
    _to_str,
)
from linguacourse.constants import (
    INTRODUCTION,
    TIME_FORMAT,
    TIME_LEFT_PREFIX,
    BlockType,
    Complexity,
)

_ONE_SECOND = timedelta(seconds=1)
_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class MainCourseInfo:
    """Header data of a course; ``limit`` is None when the course is untimed."""

    name: str
    intro: str
    limit: timedelta | None


def _parse_limit(text: str) -> timedelta | None:
    if not text:
        return None
    try:
        parsed = datetime.strptime(text, TIME_FORMAT)
    except ValueError:
        return None
    return timedelta(hours=parsed.hour, minutes=parsed.minute, seconds=parsed.second)


def _format_clock(duration: timedelta) -> str:
    hours, rest = divmod(int(duration.total_seconds()), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def load_main_course_info(connection: sqlite3.Connection) -> MainCourseInfo:
    """Read the course name, introduction and time limit from ``course_info``."""
    row = _first_row(connection, "SELECT * FROM course_info")
    return MainCourseInfo(
        name=_to_str(row.get("course_name")),
        intro=_to_str(row.get("course_intro")),
        limit=_parse_limit(_to_str(row.get("course_time_limit"))),
    )


def _make_block(
    database_path: str | os.PathLike[str],
    block_type: BlockType,
    complexity: Complexity,
    base_dir: str | os.PathLike[str],
    backend: Any,
) -> Block:
    block_type = BlockType(block_type)
    complexity = Complexity(complexity)
    if block_type is BlockType.GRAMMAR:
        return GrammarBlock(database_path, complexity, base_dir)
    if block_type is BlockType.LISTENING:
        return ListeningBlock(database_path, complexity, base_dir, backend)
    return ReadingBlock(database_path, complexity, base_dir)


def load_block(
    database_path: str | os.PathLike[str],
    block_type: BlockType,
    complexity: Complexity,
    base_dir: str | os.PathLike[str],
) -> Block:
    """Open a block of the given type at the given complexity."""
    return _make_block(database_path, block_type, complexity, base_dir, None)


class Course:
    """A course loaded from its database, with navigation, timing and scoring.

    Section 0 is the introduction; section ``i`` (``i >= 1``) is block ``i - 1``.
    Subscribers receive the course percent whenever the course is submitted.
    """

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        complexity: Complexity,
        base_dir: str | os.PathLike[str] = "",
        backend: Any = None,
    ) -> None:
        self.complexity = Complexity(complexity)
        self.base_dir = base_dir
        self.connection = sqlite3.connect(os.fspath(database_path))
        self.blocks: list[Block] = []
        self._section_names = [INTRODUCTION]
        try:
            self.info = load_main_course_info(self.connection)
            self._load_blocks(backend)
        except Exception:
            self.close()
            raise
        self.remaining = self.info.limit
        self.timer_running = self.remaining is not None
        self.time_is_up = False
        self.current_index = 0
        self._subscribers: list[Callable[[int], object]] = []

    def _load_blocks(self, backend: Any) -> None:
        for row in _query(self.connection, "SELECT * FROM blocks"):
            try:
                block_type = BlockType(_to_int(row.get("block_type")))
            except ValueError:
                continue
            path = _resolve(self.base_dir, _to_str(row.get("block_db_path")))
            block = _make_block(path, block_type, self.complexity, self.base_dir, backend)
            self.blocks.append(block)
            self._section_names.append(_to_str(row.get("block_name")))

    def name(self) -> str:
        return self.info.name

    def value(self) -> int:
        """Maximum points the course can give."""
        return sum(block.value() for block in self.blocks)

    def score(self) -> int:
        """Points earned for the current responses."""
        return sum(block.score() for block in self.blocks)

    def percent(self) -> int:
        """Score as a whole percentage of the value, truncated; 0 for an empty course."""
        total = self.value()
        if total == 0:
            return 0
        return int(self.score() / total * 100)

    def section_names(self) -> list[str]:
        """Names shown in the section list, the introduction first."""
        return list(self._section_names)

    @property
    def current_block(self) -> Block | None:
        """The block on display, or None on the introduction page."""
        return None if self.current_index == 0 else self.blocks[self.current_index - 1]

    def go_to(self, index: int) -> None:
        """Show the section at ``index``."""
        if not 0 <= index < len(self._section_names):
            raise IndexError(
                f"section {index} out of range for {len(self._section_names)} sections"
            )
        self.current_index = index

    def next(self) -> int:
        """Move to the next section and return its index."""
        self.go_to(self.current_index + 1)
        return self.current_index

    def previous(self) -> int:
        """Move to the previous section and return its index."""
        self.go_to(self.current_index - 1)
        return self.current_index

    def can_go_back(self) -> bool:
        return self.current_index > 0

    def can_go_forward(self) -> bool:
        return self.current_index < len(self._section_names) - 1

    def subscribe(self, callback: Callable[[int], object]) -> None:
        """Call ``callback(percent)`` whenever the course is submitted."""
        self._subscribers.append(callback)

    @property
    def time_left_text(self) -> str | None:
        """Countdown text, or None when the course is untimed."""
        if self.remaining is None:
            return None
        return TIME_LEFT_PREFIX + _format_clock(self.remaining)

    def tick(self) -> timedelta | None:
        """Advance the countdown by one second; submit when it reaches zero."""
        if self.remaining is None or not self.timer_running:
            return self.remaining
        self.remaining = (self.remaining - _ONE_SECOND) % _ONE_DAY
        if not self.remaining:
            self.timer_running = False
            self.time_is_up = True
            self.submit()
        return self.remaining

    def submit(self) -> int:
        """Send the course percent to every subscriber and return it."""
        percent = self.percent()
        for callback in list(self._subscribers):
            callback(percent)
        return percent

    def close(self) -> None:
        """Close every block and the course database."""
        self.timer_running = False
        for block in self.blocks:
            block.close()
        self.connection.close()

    def __enter__(self) -> Course:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()