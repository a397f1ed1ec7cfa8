"""Enumerations and fixed texts, titles, paths and timings shared by the package."""

from enum import IntEnum


class BlockType(IntEnum):
    """Kind of a course block as stored in a course database."""

    GRAMMAR = 0
    LISTENING = 1
    READING = 2


class Complexity(IntEnum):
    """Difficulty level chosen before a course starts."""

    EASY = 0
    HARD = 2


class QuestionType(IntEnum):
    """Kind of a question as stored in a task table."""

    OPEN_QUESTION = 0
    OPTION_QUESTION = 1
    MULTI_OPTION_QUESTION = 2
    TRUE_FALSE_QUESTION = 3


class CourseBlockTypes(IntEnum):
    """Ordering of block kinds inside a course."""

    LISTENING = 0
    READING = 1
    GRAMMAR = 2


# Titles
MAIN_WINDOW_TITLE = "Duolingo clone"
SUBMISSION_DIALOG_TITLE = "Confirm Submission"
COMPLEXITY_DIALOG_TITLE = "Complexity"
WARNING_TITLE = "Warning"

# Texts
CONFIRM_SUBMISSION = "Are you sure you want to finish and send the results?"
SEND_RESULTS = "Send results..."
START_COURSE = "Start..."
OK = "Ok"
CANCEL = "Cancel"
RETURN_TO_THE_MAIN_PAGE = "To the main page"
CHOOSE_COMPLEXITY = "Choose complexity: "
EASY_LEVEL = "Easy"
EASY_LEVEL_DESCRIPTION = "Help buttons available, more listening attempts"
HARD_LEVEL = "Hard"
HARD_LEVEL_DESCRIPTION = "Only hardcore"
CHOOSE_AN_OPTION = "Please, choose an option"
WELCOME = "Welcome in Duolingo!"
INTRODUCTION = "Introduction"
TIME_IS_UP_TITLE = "Time is up"
TIME_IS_UP_TEXT = "The course time has ended!"
TIME_LEFT_PREFIX = "Time left: "

# Image resources
MAIN_WINDOW_ICON = "images/duo_logo.png"
LEFT_ARROW_ICON = "images/left_arrow.png"
RIGHT_ARROW_ICON = "images/right_arrow.png"
COURSE_INTRO_IMAGE = "images/joyful_duo.png"
WELCOMING_IMAGE = "images/welcoming_duo.png"
BAD_RESULT_IMAGE = "images/crying_duo.png"
MEDIUM_RESULT_IMAGE = "images/sad_duo.png"
GOOD_RESULT_IMAGE = "images/happy_duo.png"

# Formats: course time limits are stored as hh:mm:ss
TIME_FORMAT = "%H:%M:%S"

# Proportions, as (width, height)
SWITCHER_SIZE = (50, 50)
SWITCHER_ICON_SIZE = (40, 40)
HELP_BUTTON_SIZE = (80, 30)
STD_IMAGE_SIZE = (200, 200)
ENLARGED_IMAGE_SIZE = (300, 300)
SUBMIT_COURSE_DIALOG_SIZE = (200, 130)
COMPLEXITY_DIALOG_SIZE = (200, 130)
MAIN_WINDOW_MIN_SIZE = (400, 400)
MAIN_WINDOW_SIZE = (680, 550)
SECTION_LIST_WIDTH = 160
TASK_CONTENT_MARGINS = (10, 20, 10, 10)

# Timings, in milliseconds
HELP_INFO_DELAY_MS = 200
COUNTDOWN_TIMER_INTERVAL_MS = 1000

# Listening plays allowed per complexity
EASY_PLAY_LIMIT = 2
HARD_PLAY_LIMIT = 1