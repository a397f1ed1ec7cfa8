"""Result of a finished course: the text shown and the grade picture."""

from __future__ import annotations

from enum import Enum

from linguacourse.constants import (
    BAD_RESULT_IMAGE,
    GOOD_RESULT_IMAGE,
    MEDIUM_RESULT_IMAGE,
)


class ResultGrade(Enum):
    """Grade of a course result, carrying the image shown for it."""

    BAD = BAD_RESULT_IMAGE
    MEDIUM = MEDIUM_RESULT_IMAGE
    GOOD = GOOD_RESULT_IMAGE

    @property
    def image(self) -> str:
        return self.value


def grade_for(percent: int) -> ResultGrade | None:
    """Grade for a percentage; None outside 0..100."""
    if not 0 <= percent <= 100:
        return None
    if percent <= 30:
        return ResultGrade.BAD
    if percent <= 69:
        return ResultGrade.MEDIUM
    return ResultGrade.GOOD


def result_text(percent: int) -> str:
    """Text announcing the result."""
    return f"Your result: {percent}%"