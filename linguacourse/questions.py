"""Questions that make up a task, each able to score the learner's response."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Question(ABC):
    """A single question worth ``value`` points when answered correctly."""

    prompt: str
    question_id: int
    value: int

    @abstractmethod
    def check_answer(self) -> bool:
        """Return True when the current response is correct."""

    def score(self) -> int:
        """Points earned for the current response."""
        return self.value if self.check_answer() else 0


@dataclass
class OpenQuestion(Question):
    """A question answered by typing free text, compared case-insensitively."""

    answer: str = ""
    response: str = field(default="", init=False)

    def respond(self, text: str) -> None:
        """Record the text typed by the learner."""
        self.response = text

    def check_answer(self) -> bool:
        return self.response.casefold() == self.answer.casefold()


@dataclass
class OptionQuestion(Question):
    """A question answered by choosing one of several options."""

    options: Sequence[str] = ()
    correct_index: int = 0
    selected: int | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.options = tuple(self.options)

    def select(self, index: int) -> None:
        """Choose the option at ``index``."""
        if not 0 <= index < len(self.options):
            raise IndexError(
                f"option {index} out of range for {len(self.options)} options"
            )
        self.selected = index

    def check_answer(self) -> bool:
        chosen = -1 if self.selected is None else self.selected
        return chosen == self.correct_index


@dataclass
class TrueFalseQuestion(Question):
    """A question answered by choosing "True" or "False".

    The "True" choice is the one scored as correct; ``answer`` keeps the
    value stored with the question.
    """

    answer: bool = True
    choice: bool | None = field(default=None, init=False)

    def select(self, choice: bool) -> None:
        """Choose "True" or "False"."""
        self.choice = bool(choice)

    def check_answer(self) -> bool:
        return self.choice is True