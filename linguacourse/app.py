"""Console front end: main page, dialogs, course navigation and result page."""

from __future__ import annotations

import argparse
import os
import time
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from linguacourse.blocks import Block, ListeningBlock, ReadingBlock
from linguacourse.catalog import Catalog
from linguacourse.constants import (
    CANCEL,
    CHOOSE_AN_OPTION,
    CHOOSE_COMPLEXITY,
    COMPLEXITY_DIALOG_TITLE,
    CONFIRM_SUBMISSION,
    EASY_LEVEL,
    EASY_LEVEL_DESCRIPTION,
    HARD_LEVEL,
    HARD_LEVEL_DESCRIPTION,
    MAIN_WINDOW_TITLE,
    OK,
    RETURN_TO_THE_MAIN_PAGE,
    SEND_RESULTS,
    START_COURSE,
    SUBMISSION_DIALOG_TITLE,
    TIME_IS_UP_TEXT,
    TIME_IS_UP_TITLE,
    WARNING_TITLE,
    WELCOME,
    Complexity,
)
from linguacourse.course import Course
from linguacourse.player import PlaybackState
from linguacourse.questions import (
    OpenQuestion,
    OptionQuestion,
    Question,
    TrueFalseQuestion,
)
from linguacourse.results import grade_for, result_text

Ask = Callable[[str], str]
Say = Callable[[str], object]
_T = TypeVar("_T")

_EASY_ANSWERS = {"", "1", "e", "easy"}
_HARD_ANSWERS = {"2", "h", "hard"}
_CANCEL_ANSWERS = {"c", "cancel"}
_YES_ANSWERS = {"ok", "y", "yes"}
_NO_ANSWERS = {"", "c", "cancel", "n", "no"}
_TRUE_ANSWERS = {"t", "true", "y", "yes"}
_FALSE_ANSWERS = {"f", "false", "n", "no"}

_COURSE_COMMANDS = (
    "Commands: n next, p previous, <number> go to section, l list sections, "
    f"a answer questions, h help, play listen, s {SEND_RESULTS.rstrip('.')}, ? commands"
)


class PygameAudioBackend:
    """Sound output through the pygame mixer."""

    def __init__(self) -> None:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        pygame.mixer.init()
        self._error = pygame.error
        self._music = pygame.mixer.music
        self._loaded = False
        self._paused = False

    def load(self, file_path: str) -> None:
        self._paused = False
        try:
            self._music.load(file_path)
        except self._error:
            self._loaded = False
        else:
            self._loaded = True

    def play(self) -> None:
        if not self._loaded:
            return
        if self._paused:
            self._music.unpause()
            self._paused = False
        else:
            self._music.play()

    def pause(self) -> None:
        if self._loaded:
            self._music.pause()
            self._paused = True

    def set_position(self, position: int) -> None:
        if not self._loaded:
            return
        try:
            self._music.set_pos(position / 1000)
        except self._error:
            pass

    @property
    def busy(self) -> bool:
        """Whether a file is playing or paused."""
        return self._loaded and (self._paused or bool(self._music.get_busy()))


def choose_complexity(ask: Ask, say: Say) -> Complexity | None:
    """Ask for the course level; None when the choice is cancelled."""
    say(COMPLEXITY_DIALOG_TITLE)
    say(CHOOSE_COMPLEXITY)
    say(f"  1) {EASY_LEVEL} - {EASY_LEVEL_DESCRIPTION}")
    say(f"  2) {HARD_LEVEL} - {HARD_LEVEL_DESCRIPTION}")
    while True:
        answer = ask(f"Level [1] ({OK}) or c ({CANCEL}): ").strip().casefold()
        if answer in _EASY_ANSWERS:
            return Complexity.EASY
        if answer in _HARD_ANSWERS:
            return Complexity.HARD
        if answer in _CANCEL_ANSWERS:
            return None
        say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")


def confirm_submission(ask: Ask, say: Say) -> bool:
    """Ask whether to finish the course and send the results."""
    say(SUBMISSION_DIALOG_TITLE)
    say(CONFIRM_SUBMISSION)
    while True:
        answer = ask(f"{OK} / {CANCEL}: ").strip().casefold()
        if answer in _YES_ANSWERS:
            return True
        if answer in _NO_ANSWERS:
            return False
        say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")


def _pick(answer: str, items: Sequence[_T]) -> _T | None:
    if answer.isdigit() and 1 <= int(answer) <= len(items):
        return items[int(answer) - 1]
    return None


class ConsoleApp:
    """The whole application driven through text prompts."""

    def __init__(
        self,
        database_path: str | os.PathLike[str],
        base_dir: str | os.PathLike[str] = "",
        *,
        ask: Ask | None = None,
        say: Say | None = None,
        backend: Any = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._ask = ask if ask is not None else input
        self._say = say if say is not None else print
        self._clock = clock if clock is not None else time.monotonic
        self.backend = backend
        self.current_course: Course | None = None
        self._submitted: int | None = None
        self._last_tick = 0.0
        self.catalog = Catalog(database_path, base_dir, backend, self._open_course)

    def run(self) -> int:
        """Run until the user quits or input ends; return the exit status."""
        self._say(MAIN_WINDOW_TITLE)
        try:
            while self._main_page():
                pass
        except EOFError:
            pass
        finally:
            self._close_current_course()
            self.catalog.close()
        return 0

    def _main_page(self) -> bool:
        self._say(WELCOME)
        for number, section in enumerate(self.catalog.sections, start=1):
            self._say(f"{number}) {section.name} [{section.progress}%]")
        answer = self._ask(
            f"Course number ({START_COURSE}) or q to quit: "
        ).strip().casefold()
        if answer in ("q", "quit"):
            return False
        section = _pick(answer, self.catalog.sections)
        if section is None:
            self._say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")
            return True
        complexity = choose_complexity(self._ask, self._say)
        if complexity is None:
            return True
        section.start(complexity)
        if self.current_course is not None:
            try:
                self._run_course(self.current_course)
            finally:
                self._close_current_course()
        return True

    def _open_course(self, course: Course) -> None:
        self.current_course = course
        self._submitted = None
        course.subscribe(self._on_submitted)
        self._last_tick = self._clock()

    def _on_submitted(self, percent: int) -> None:
        self._submitted = percent

    def _close_current_course(self) -> None:
        if self.current_course is not None:
            self.current_course.close()
            self.current_course = None

    def _run_course(self, course: Course) -> None:
        self._show_section(course)
        self._say(_COURSE_COMMANDS)
        while True:
            self._advance_timer(course)
            self._poll_player(course)
            if self._submitted is not None:
                self._result_page(course, self._submitted)
                return
            command = self._ask("> ").strip().casefold()
            self._handle(course, command)

    def _advance_timer(self, course: Course) -> None:
        elapsed = int(self._clock() - self._last_tick)
        if elapsed <= 0:
            return
        self._last_tick += elapsed
        was_up = course.time_is_up
        for _ in range(elapsed):
            if not course.timer_running:
                break
            course.tick()
        if course.time_is_up and not was_up:
            self._say(f"{TIME_IS_UP_TITLE}: {TIME_IS_UP_TEXT}")

    def _poll_player(self, course: Course) -> None:
        block = course.current_block
        if not isinstance(block, ListeningBlock) or self.backend is None:
            return
        player = block.player
        if player.state is PlaybackState.PLAYING and not getattr(self.backend, "busy", True):
            player.handle_end_of_media()

    def _handle(self, course: Course, command: str) -> None:
        if command in ("", "show"):
            self._show_section(course)
        elif command in ("n", "next"):
            if course.can_go_forward():
                course.next()
                self._show_section(course)
            else:
                self._say("This is the last section.")
        elif command in ("p", "prev", "previous"):
            if course.can_go_back():
                course.previous()
                self._show_section(course)
            else:
                self._say("This is the first section.")
        elif command.isdigit():
            try:
                course.go_to(int(command))
            except IndexError:
                self._say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")
            else:
                self._show_section(course)
        elif command in ("l", "list"):
            for index, name in enumerate(course.section_names()):
                marker = "*" if index == course.current_index else " "
                self._say(f"{marker}{index}) {name}")
        elif command in ("a", "answer"):
            self._answer_block(course.current_block)
        elif command in ("h", "help"):
            self._help(course.current_block)
        elif command == "play":
            self._play(course.current_block)
        elif command in ("s", "submit"):
            if confirm_submission(self._ask, self._say):
                course.submit()
        elif command == "?":
            self._say(_COURSE_COMMANDS)
        else:
            self._say(f"Unknown command. {_COURSE_COMMANDS}")

    def _show_section(self, course: Course) -> None:
        time_left = course.time_left_text
        if time_left is not None:
            self._say(time_left)
        block = course.current_block
        if block is None:
            self._say(course.name())
            self._say(course.info.intro)
            return
        self._say(block.name())
        self._say(block.info.intro)
        if block.has_image:
            self._say(f"[image: {block.info.image_path}]")
        if isinstance(block, ReadingBlock):
            self._say(block.text)
        if isinstance(block, ListeningBlock):
            self._show_player(block)
        if block.help_visible:
            self._say("Help is available: type h")
        for task in block.tasks:
            self._say(f"== {task.name} ==")
            if task.intro:
                self._say(task.intro)
            for question in task.questions:
                self._say(question.prompt)

    def _show_player(self, block: ListeningBlock) -> None:
        player = block.player
        self._say(f"[{player.button_text}] {player.position_label} / {player.duration_label}")
        plays_left = player.plays_left_text()
        if plays_left is not None:
            self._say(plays_left)

    def _help(self, block: Block | None) -> None:
        if block is not None and block.help_visible:
            self._say(block.info.help)
        else:
            self._say("Help is not available here.")

    def _play(self, block: Block | None) -> None:
        if not isinstance(block, ListeningBlock):
            self._say("There is nothing to play here.")
            return
        player = block.player
        if not player.button_enabled:
            self._say("No plays left.")
            return
        if player.state is PlaybackState.STOPPED and self.backend is not None:
            self.backend.load(player.current_file)
        state = player.play_pause()
        if self.backend is None and state is PlaybackState.PLAYING:
            player.handle_end_of_media()
        self._show_player(block)

    def _answer_block(self, block: Block | None) -> None:
        if block is None:
            self._say("There are no questions here.")
            return
        for task in block.tasks:
            self._say(f"== {task.name} ==")
            for question in task.questions:
                self._answer_question(question)

    def _answer_question(self, question: Question) -> None:
        self._say(question.prompt)
        if isinstance(question, OpenQuestion):
            text = self._ask("Answer: ")
            if text:
                question.respond(text)
        elif isinstance(question, OptionQuestion):
            for number, option in enumerate(question.options, start=1):
                self._say(f"  {number}. {option}")
            while True:
                answer = self._ask("Option number: ").strip()
                if not answer:
                    return
                if answer.isdigit() and 1 <= int(answer) <= len(question.options):
                    question.select(int(answer) - 1)
                    return
                self._say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")
        elif isinstance(question, TrueFalseQuestion):
            while True:
                answer = self._ask("True or False (t/f): ").strip().casefold()
                if not answer:
                    return
                if answer in _TRUE_ANSWERS or answer in _FALSE_ANSWERS:
                    question.select(answer in _TRUE_ANSWERS)
                    return
                self._say(f"{WARNING_TITLE}: {CHOOSE_AN_OPTION}")

    def _result_page(self, course: Course, percent: int) -> None:
        self._say(course.name())
        self._say(result_text(percent))
        grade = grade_for(percent)
        if grade is not None:
            self._say(f"[image: {grade.image}]")
        self._ask(f"{RETURN_TO_THE_MAIN_PAGE} (press Enter) ")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="linguacourse", description="Take language courses in the terminal."
    )
    parser.add_argument(
        "database",
        nargs="?",
        default=os.path.join("data", "courses_db.db"),
        help="catalogue database listing the courses",
    )
    parser.add_argument(
        "--base-dir",
        default=None,
        help="directory that course, block and media paths are relative to "
        "(default: the current directory)",
    )
    parser.add_argument("--no-sound", action="store_true", help="do not play audio")
    args = parser.parse_args(argv)
    if not os.path.isfile(args.database):
        parser.error(f"no such database: {args.database}")

    backend = None
    if not args.no_sound:
        try:
            backend = PygameAudioBackend()
        except (ImportError, RuntimeError):
            backend = None
    base_dir = args.base_dir if args.base_dir is not None else os.getcwd()
    return ConsoleApp(args.database, base_dir, backend=backend).run()