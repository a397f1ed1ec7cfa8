import itertools
import sqlite3

import pytest

from linguacourse.app import ConsoleApp, choose_complexity, confirm_submission, main
from linguacourse.constants import (
    CHOOSE_AN_OPTION,
    TIME_IS_UP_TEXT,
    WELCOME,
    Complexity,
)
from linguacourse.results import ResultGrade, result_text


def _build(tmp_path, time_limit=""):
    block = sqlite3.connect(tmp_path / "animals.db")
    block.executescript(
        """
        CREATE TABLE grammar_block (block_name, block_intro, image_path, block_help);
        CREATE TABLE tasks (task_name, task_table_name, task_intro);
        CREATE TABLE questions (question_id, question_number, question_type,
            question_text, question_value, correct_answer, correct_answer_index,
            option_a, option_b);
        INSERT INTO grammar_block VALUES
            ('Animals', 'Learn animal words', 'images/none.png', 'Nouns take articles');
        INSERT INTO tasks VALUES ('Words', 'questions', 'Answer the questions');
        INSERT INTO questions VALUES (1, 1, 0, 'Say cat', 2, 'cat', NULL, NULL, NULL);
        INSERT INTO questions VALUES (2, 2, 1, 'Sky colour', 3, NULL, 1, 'red', 'blue');
        INSERT INTO questions VALUES (3, 3, 3, 'Dogs bark', 1, 1, NULL, NULL, NULL);
        """
    )
    block.commit()
    block.close()

    course = sqlite3.connect(tmp_path / "basics.db")
    course.executescript(
        """
        CREATE TABLE course_info (course_name, course_intro, course_time_limit);
        CREATE TABLE blocks (block_name, block_type, block_db_path);
        INSERT INTO blocks VALUES ('Animals', 0, 'animals.db');
        """
    )
    course.execute(
        "INSERT INTO course_info VALUES ('Basics', 'Start here', ?)", (time_limit,)
    )
    course.commit()
    course.close()

    catalog = sqlite3.connect(tmp_path / "courses.db")
    catalog.executescript(
        """
        CREATE TABLE courses (course_name, course_db_path);
        INSERT INTO courses VALUES ('Basics', 'basics.db');
        """
    )
    catalog.commit()
    catalog.close()
    return tmp_path / "courses.db"


def _script(answers):
    remaining = iter(answers)

    def ask(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return ask


@pytest.mark.parametrize(
    "answers, expected",
    [
        ([""], Complexity.EASY),
        (["1"], Complexity.EASY),
        (["hard"], Complexity.HARD),
        (["c"], None),
    ],
)
def test_choose_complexity(answers, expected):
    assert choose_complexity(_script(answers), [].append) is expected


def test_choose_complexity_warns_on_unknown_answer():
    said = []
    assert choose_complexity(_script(["maybe", "2"]), said.append) is Complexity.HARD
    assert any(CHOOSE_AN_OPTION in line for line in said)


@pytest.mark.parametrize(
    "answers, expected",
    [(["ok"], True), (["yes"], True), (["cancel"], False), ([""], False), (["x", "ok"], True)],
)
def test_confirm_submission(answers, expected):
    assert confirm_submission(_script(answers), [].append) is expected


def test_full_course_run_updates_progress(tmp_path):
    said = []
    inputs = ["1", "1", "n", "a", "CAT", "2", "t", "s", "ok", "", "q"]
    app = ConsoleApp(_build(tmp_path), str(tmp_path), ask=_script(inputs), say=said.append)
    assert app.run() == 0
    output = "\n".join(said)
    assert result_text(100) in output
    assert ResultGrade.GOOD.image in output
    assert app.catalog.sections[0].progress == 100
    assert app.current_course is None


def test_timed_course_submits_when_time_is_up(tmp_path):
    said = []
    clock = itertools.chain([0.0], itertools.repeat(10.0)).__next__
    app = ConsoleApp(
        _build(tmp_path, "00:00:02"),
        str(tmp_path),
        ask=_script(["1", "1", "", "q"]),
        say=said.append,
        clock=clock,
    )
    assert app.run() == 0
    output = "\n".join(said)
    assert TIME_IS_UP_TEXT in output
    assert result_text(0) in output
    assert app.catalog.sections[0].progress == 0


def test_cancelled_complexity_starts_nothing(tmp_path):
    app = ConsoleApp(
        _build(tmp_path), str(tmp_path), ask=_script(["1", "c", "q"]), say=[].append
    )
    assert app.run() == 0
    assert app.catalog.sections[0].course is None


def test_invalid_course_number_warns(tmp_path):
    said = []
    app = ConsoleApp(_build(tmp_path), str(tmp_path), ask=_script(["9", "q"]), say=said.append)
    assert app.run() == 0
    assert app.catalog.sections[0].course is None
    assert app.current_course is None
    assert any(CHOOSE_AN_OPTION in line for line in said)


def test_navigation_and_help(tmp_path):
    said = []
    app = ConsoleApp(
        _build(tmp_path), str(tmp_path), ask=_script(["1", "1", "n", "h", "n"]), say=said.append
    )
    assert app.run() == 0
    assert "Learn animal words" in said
    assert "Nouns take articles" in said
    assert "This is the last section." in said


def test_help_hidden_on_hard_level(tmp_path):
    said = []
    app = ConsoleApp(
        _build(tmp_path), str(tmp_path), ask=_script(["1", "2", "n", "h"]), say=said.append
    )
    app.run()
    assert "Nouns take articles" not in said
    assert "Help is not available here." in said


def test_end_of_input_closes_everything(tmp_path):
    app = ConsoleApp(_build(tmp_path), str(tmp_path), ask=_script(["1", "1"]), say=[].append)
    assert app.run() == 0
    assert app.current_course is None
    with pytest.raises(sqlite3.ProgrammingError):
        app.catalog.connection.execute("SELECT 1")


def test_main_quits_from_main_page(tmp_path, monkeypatch, capsys):
    catalog = _build(tmp_path)
    monkeypatch.setattr("builtins.input", lambda prompt="": "q")
    assert main([str(catalog), "--base-dir", str(tmp_path), "--no-sound"]) == 0
    assert WELCOME in capsys.readouterr().out


def test_main_rejects_missing_database(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.db"), "--no-sound"])