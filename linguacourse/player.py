"""State of an audio player with play limits, seeking and pause control."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class PlaybackState(Enum):
    """Playback state of the player."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class _AudioBackend(Protocol):
    def load(self, file_path: str) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def set_position(self, position: int) -> None: ...


def format_time(milliseconds: int) -> str:
    """Format a time in milliseconds as mm:ss."""
    if milliseconds < 0:
        raise ValueError("time must not be negative")
    minutes, seconds = divmod(milliseconds // 1000, 60)
    return f"{minutes:02d}:{seconds:02d}"


class AudioPlayer:
    """Player controls; an optional backend does the actual sound output.

    A play limit of ``None`` (or a negative number) means unlimited plays.
    """

    def __init__(self, file_path: str, backend: _AudioBackend | None = None) -> None:
        self.backend = backend
        self.play_limit: int | None = None
        self.play_count = 0
        self.seeking_enabled = True
        self.pause_enabled = True
        self.state = PlaybackState.STOPPED
        self.button_text = "Play"
        self.button_enabled = True
        self.position = 0
        self.duration = 0
        self.position_label = format_time(0)
        self.duration_label = format_time(0)
        self.current_file = ""
        self.set_audio_file(file_path)

    def set_audio_file(self, file_path: str) -> None:
        """Load a new file and reset the play count."""
        self.current_file = file_path
        self.play_count = 0
        self._update_plays_left()
        if self.backend is not None:
            self.backend.load(file_path)

    def set_play_limit(self, limit: int | None) -> None:
        """Limit how many times the file may be played to the end."""
        self.play_limit = None if limit is None or limit < 0 else limit
        self.play_count = 0
        self._update_plays_left()

    def enable_seeking(self, enabled: bool) -> None:
        self.seeking_enabled = enabled

    def enable_pause(self, enabled: bool) -> None:
        self.pause_enabled = enabled

    def play_pause(self) -> PlaybackState:
        """Press the play button; return the resulting state.

        Does nothing while the button is disabled.
        """
        if not self.button_enabled:
            return self.state
        if self.state is PlaybackState.PLAYING and self.pause_enabled:
            if self.backend is not None:
                self.backend.pause()
            self._set_state(PlaybackState.PAUSED)
        else:
            if self.backend is not None:
                self.backend.play()
            self._set_state(PlaybackState.PLAYING)
        return self.state

    def update_position(self, position: int) -> None:
        """Report the current playback position in milliseconds."""
        self.position = position
        self.position_label = format_time(position)

    def update_duration(self, duration: int) -> None:
        """Report the media duration in milliseconds."""
        self.duration = duration
        self.duration_label = format_time(duration)

    def set_position(self, position: int) -> None:
        """Seek to ``position`` if seeking is allowed."""
        if not self.seeking_enabled:
            return
        if self.backend is not None:
            self.backend.set_position(position)
        self.update_position(position)

    def handle_end_of_media(self) -> None:
        """Count a finished play and stop."""
        self.play_count += 1
        self.button_enabled = True
        self._update_plays_left()
        self._set_state(PlaybackState.STOPPED)

    def plays_left_text(self) -> str | None:
        """Text showing remaining plays, or None when unlimited."""
        if self.play_limit is None:
            return None
        left = self.play_limit - self.play_count
        return f"Plays left: {left}/{self.play_limit}"

    def _set_state(self, state: PlaybackState) -> None:
        self.state = state
        if state is PlaybackState.PLAYING:
            self.button_text = "Pause"
            if not self.pause_enabled:
                self.button_enabled = False
        else:
            self.button_text = "Play"

    def _update_plays_left(self) -> None:
        if self.play_limit is None:
            return
        if self.play_limit - self.play_count == 0:
            self.button_enabled = False
            self.enable_seeking(False)