"""Terminal language-learning courses built from scored question blocks read from SQLite."""

__version__ = "0.1.0"