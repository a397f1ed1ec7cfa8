import os
import sqlite3

import pytest

from linguacourse.catalog import Catalog, CourseSection
from linguacourse.constants import Complexity


def _build(tmp_path):
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
        INSERT INTO course_info VALUES ('Basics', 'Start here', '');
        INSERT INTO blocks VALUES ('Animals', 0, 'animals.db');
        """
    )
    course.commit()
    course.close()

    catalog = sqlite3.connect(tmp_path / "courses.db")
    catalog.executescript(
        """
        CREATE TABLE courses (course_name, course_db_path);
        INSERT INTO courses VALUES ('Basics', 'basics.db');
        INSERT INTO courses VALUES ('Travel', 'basics.db');
        """
    )
    catalog.commit()
    catalog.close()
    return tmp_path / "courses.db"


def _answer_all(course):
    questions = course.blocks[0].tasks[0].questions
    questions[0].respond("CAT")
    questions[1].select(1)
    questions[2].select(True)


def test_sections_follow_database_order(tmp_path):
    with Catalog(_build(tmp_path), str(tmp_path)) as catalog:
        assert [section.name for section in catalog] == ["Basics", "Travel"]
        assert len(catalog) == 2
        assert catalog.sections[0].database_path == os.path.join(str(tmp_path), "basics.db")
        assert all(section.progress == 0 for section in catalog)


def test_start_notifies_listener(tmp_path):
    started = []
    with Catalog(_build(tmp_path), str(tmp_path), on_course_started=started.append) as catalog:
        section = catalog.sections[0]
        course = section.start(Complexity.EASY)
        try:
            assert started == [course]
            assert section.course is course
            assert course.name() == "Basics"
            assert course.blocks[0].help_visible is True
        finally:
            course.close()


def test_hard_start_hides_help(tmp_path):
    with Catalog(_build(tmp_path), str(tmp_path)) as catalog:
        course = catalog.sections[1].start(Complexity.HARD)
        try:
            assert course.blocks[0].help_visible is False
        finally:
            course.close()


def test_submission_updates_progress(tmp_path):
    with Catalog(_build(tmp_path), str(tmp_path)) as catalog:
        section = catalog.sections[0]
        course = section.start(Complexity.EASY)
        try:
            _answer_all(course)
            percent = course.submit()
            assert section.progress == percent == course.percent()
            assert percent == 100
        finally:
            course.close()


def test_submission_without_answers_keeps_zero(tmp_path):
    with Catalog(_build(tmp_path), str(tmp_path)) as catalog:
        section = catalog.sections[0]
        course = section.start(Complexity.EASY)
        try:
            assert course.submit() == section.progress == 0
        finally:
            course.close()


def test_update_progress_ignores_out_of_range():
    section = CourseSection("Basics", "unused.db")
    section.update_progress(40)
    assert section.progress == 40
    section.update_progress(150)
    assert section.progress == 40
    section.update_progress(-1)
    assert section.progress == 40


def test_close_releases_database(tmp_path):
    catalog = Catalog(_build(tmp_path), str(tmp_path))
    catalog.close()
    with pytest.raises(sqlite3.ProgrammingError):
        catalog.connection.execute("SELECT 1")


def test_missing_courses_table_raises(tmp_path):
    empty = tmp_path / "empty.db"
    sqlite3.connect(empty).close()
    with pytest.raises(sqlite3.OperationalError):
        Catalog(empty, str(tmp_path))