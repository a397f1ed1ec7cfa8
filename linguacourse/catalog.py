"""The catalogue of courses on the main page, each with its progress."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Callable, Iterator
from typing import Any

from linguacourse.blocks import _query, _resolve, _to_str
from linguacourse.constants import Complexity
from linguacourse.course import Course

CourseStarted = Callable[[Course], object]


class CourseSection:
    """A course entry: its name, database and the progress of its last submission."""

    def __init__(
        self,
        name: str,
        database_path: str | os.PathLike[str],
        base_dir: str | os.PathLike[str] = "",
        backend: Any = None,
        on_start: CourseStarted | None = None,
    ) -> None:
        self.name = name
        self.database_path = database_path
        self.base_dir = base_dir
        self.backend = backend
        self.on_start = on_start
        self.progress = 0
        self.course: Course | None = None

    def start(self, complexity: Complexity) -> Course:
        """Open the course at ``complexity`` and announce it to the listener."""
        course = Course(
            self.database_path, Complexity(complexity), self.base_dir, self.backend
        )
        course.subscribe(self.update_progress)
        self.course = course
        if self.on_start is not None:
            self.on_start(course)
        return course

    def update_progress(self, percent: int) -> None:
        """Show ``percent`` as the progress; values outside 0..100 are ignored."""
        if 0 <= percent <= 100:
            self.progress = percent


class Catalog:
    """Every course listed in the ``courses`` table of the catalogue database."""

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        base_dir: str | os.PathLike[str] = "",
        backend: Any = None,
        on_course_started: CourseStarted | None = None,
    ) -> None:
        self.base_dir = base_dir
        self.on_course_started = on_course_started
        self.connection = sqlite3.connect(os.fspath(database_path))
        try:
            self.sections = [
                CourseSection(
                    _to_str(row.get("course_name")),
                    _resolve(base_dir, _to_str(row.get("course_db_path"))),
                    base_dir,
                    backend,
                    self._course_started,
                )
                for row in _query(
                    self.connection, "SELECT course_name, course_db_path FROM courses"
                )
            ]
        except Exception:
            self.connection.close()
            raise

    def _course_started(self, course: Course) -> None:
        if self.on_course_started is not None:
            self.on_course_started(course)

    def __iter__(self) -> Iterator[CourseSection]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def close(self) -> None:
        """Close the catalogue database."""
        self.connection.close()

    def __enter__(self) -> Catalog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()