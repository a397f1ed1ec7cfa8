"""A named group of questions with an optional introduction."""

from __future__ import annotations

from dataclasses import dataclass, field

from linguacourse.questions import Question


@dataclass
class Task:
    """Questions grouped under one name and introduction."""

    name: str
    questions: list[Question] = field(default_factory=list)
    intro: str = ""

    def value(self) -> int:
        """Maximum points the task can give."""
        return sum(question.value for question in self.questions)

    def score(self) -> int:
        """Points earned for the current responses."""
        return sum(question.score() for question in self.questions)