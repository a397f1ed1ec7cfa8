import pytest

from linguacourse.constants import BAD_RESULT_IMAGE, GOOD_RESULT_IMAGE, MEDIUM_RESULT_IMAGE
from linguacourse.results import ResultGrade, grade_for, result_text


@pytest.mark.parametrize(
    "percent, grade",
    [
        (0, ResultGrade.BAD),
        (30, ResultGrade.BAD),
        (31, ResultGrade.MEDIUM),
        (69, ResultGrade.MEDIUM),
        (70, ResultGrade.GOOD),
        (100, ResultGrade.GOOD),
    ],
)
def test_grade_boundaries(percent, grade):
    assert grade_for(percent) is grade


@pytest.mark.parametrize("percent", [-1, 101, 1000])
def test_grade_out_of_range(percent):
    assert grade_for(percent) is None


@pytest.mark.parametrize(
    "percent, image",
    [(10, BAD_RESULT_IMAGE), (50, MEDIUM_RESULT_IMAGE), (90, GOOD_RESULT_IMAGE)],
)
def test_grade_images(percent, image):
    assert grade_for(percent).image == image


def test_result_text():
    assert result_text(42) == "Your result: 42%"
    assert result_text(0).startswith("Your result: ")