# linguacourse

Take language-learning courses in the terminal. A course is an
introduction followed by blocks — grammar, listening and reading — and
each block holds tasks with questions of three kinds:

- **open questions**, answered with free text, compared with the stored
  answer case-insensitively;
- **option questions**, answered by choosing one of several options;
- **true/false questions**, where choosing "True" is scored as correct.

Every question has a value. When a course is submitted, the points
earned are added up and shown as a whole percentage (truncated) of the
course's total value, together with a grade: 0–30 % bad, 31–69 %
medium, 70–100 % good. A course with no value scores 0 %.

## Installing

```
pip install .
```

Listening blocks play their audio through `pygame`, which is installed
with the package.

## Running

```
linguacourse [DATABASE] [--base-dir DIR] [--no-sound]
```

- `DATABASE` — the catalogue database listing the courses
  (default: `data/courses_db.db`).
- `--base-dir DIR` — the directory that course, block, image and audio
  paths stored in the databases are relative to (default: the current
  directory).
- `--no-sound` — do not play audio. Without sound (also when the pygame
  mixer cannot be started), pressing play counts as one full play of
  the recording at once.

The main page lists the courses with the progress of their last
submission. Type a course number to start it, or `q` to quit. You are
then asked for a level: `1`/`e`/`easy` (or just Enter) for Easy,
`2`/`h`/`hard` for Hard, `c` to cancel.

Inside a course these commands are available:

| command | action |
|---|---|
| Enter or `show` | show the current section again |
| `n` / `p` | next / previous section |
| a number | go to that section (0 is the introduction) |
| `l` | list the sections |
| `a` | answer the questions of the current block |
| `h` | show the block's help, when available |
| `play` | play the block's audio (listening blocks) |
| `s` | send the results, after confirmation |
| `?` | list the commands |

After submission the result page shows your percentage and grade; press
Enter to return to the main page.

### Complexity

- **Easy** — help is available, and the audio in listening blocks can
  be played twice.
- **Hard** — help is hidden, and the audio can be played only once.

In listening blocks the audio cannot be paused or sought through.

### Time limits

A course may carry a time limit in `hh:mm:ss`; an empty or unreadable
value means no limit. The remaining time is shown with each section and
counts down by the seconds elapsed between commands. When it reaches
zero the course is submitted automatically.

## Course data

Courses are described by SQLite databases.

The **catalogue** database has a table `courses` with the columns
`course_name` and `course_db_path`.

Each **course** database has:

- a table `course_info` with `course_name`, `course_intro` and
  `course_time_limit`;
- a table `blocks` with `block_name`, `block_type`
  (0 = grammar, 1 = listening, 2 = reading) and `block_db_path`.

Each **block** database has:

- a main table — the first table whose name contains `block` — with
  `block_name`, `block_intro`, `image_path` and `block_help`, plus
  `audio_path` for a listening block or `text` for a reading block;
- a table `tasks` with `task_name`, `task_table_name` and `task_intro`;
- one table per task with `question_id`, `question_number`,
  `question_type` (0 = open, 1 = option, 3 = true/false),
  `question_text`, `question_value`, and the answer: `correct_answer`
  for open and true/false questions, or `correct_answer_index` together
  with the columns whose names contain `option` for option questions.
  Rows of any other question type are skipped.

## Using it as a library

- `linguacourse.questions` — `OpenQuestion` (`respond`),
  `OptionQuestion` and `TrueFalseQuestion` (`select`), each with
  `check_answer()` and `score()`.
- `linguacourse.task` — `Task`, summing the `value()` and `score()` of
  its questions.
- `linguacourse.blocks` — `GrammarBlock`, `ListeningBlock` (with an
  `AudioPlayer` as `player`) and `ReadingBlock` (with `text`), loaded
  from a block database; also `load_task`, `load_block_tasks`,
  `load_main_block_info`, `main_block_table_name` and
  `find_columns_by_keyword`.
- `linguacourse.course` — `Course`, with navigation (`go_to`, `next`,
  `previous`, `can_go_back`, `can_go_forward`, `section_names`), a
  countdown (`tick`, `time_left_text`) and `submit()`, which reports
  `percent()` to callbacks registered with `subscribe`; also
  `load_block` and `load_main_course_info`.
- `linguacourse.catalog` — `Catalog`, the list of `CourseSection`s read
  from a catalogue database; `CourseSection.start(complexity)` opens a
  course and tracks its progress.
- `linguacourse.results` — `grade_for(percent)` and
  `result_text(percent)`.
- `linguacourse.player` — `AudioPlayer`, which enforces play limits and
  the pause and seeking switches, and `format_time(milliseconds)`, which
  renders `mm:ss`.
- `linguacourse.app` — `ConsoleApp`, `choose_complexity`,
  `confirm_submission`, `PygameAudioBackend` and `main`.

Blocks, courses and catalogues keep their database open until `close()`
is called; all three can be used as context managers.

## What it does not do

There is only the text interface: no graphical window. Images named in
the databases are shown as their paths, help is shown on request rather
than on hover, and the audio position is not tracked while it plays.

## Tests

```
pip install ".[test]"
pytest
```