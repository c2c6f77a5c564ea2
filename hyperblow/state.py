"""Mutable state of the terminal interface: tabs, selections, mouse and command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = ["Tab", "MouseState", "Mouse", "TUIState"]


class Tab(Enum):
    """The tabs of the lower section, in display order."""

    DETAILS = "Details"
    BANDWIDTH = "Bandwidth"
    FILES = "Files"
    TRACKERS = "Trackers"
    PEERS = "Peers"
    PIECES = "Pieces"

    @classmethod
    def from_index(cls, index: int) -> Tab:
        """The tab at ``index``; anything out of range falls back to Details."""
        members = list(cls)
        return members[index] if 0 <= index < len(members) else cls.DETAILS


class MouseState(Enum):
    """Whether the left button is held at the last known position."""

    CLICKED = "clicked"
    NOT_CLICKED = "not_clicked"


@dataclass
class Mouse:
    """Last seen mouse position and button state."""

    x: int = 0
    y: int = 0
    event: MouseState = MouseState.NOT_CLICKED


@dataclass
class TUIState:
    """Selections and command-line state shared by the interface's controllers.

    Indexes are kept within their maxima; a lower maximum pulls the current
    index down with it.
    """

    engine: Any = None
    mouse: Mouse = field(default_factory=Mouse)
    tab: Tab = Tab.DETAILS
    _tab_index: int = field(default=0, init=False, repr=False)
    _max_tab_index: int = field(default=0, init=False, repr=False)
    _torrent_index: int = field(default=0, init=False, repr=False)
    _max_torrent_index: int = field(default=0, init=False, repr=False)
    _content_row_index: int = field(default=0, init=False, repr=False)
    _max_content_row_index: int = field(default=0, init=False, repr=False)
    _command_mode: bool = field(default=False, init=False, repr=False)
    _command_input: str = field(default="", init=False, repr=False)
    _command_suggestions: list[str] = field(default_factory=list, init=False, repr=False)
    _command_suggestion_index: int = field(default=0, init=False, repr=False)
    _command_feedback: str | None = field(default=None, init=False, repr=False)
    _command_feedback_is_error: bool = field(default=False, init=False, repr=False)
    _pending_commands: int = field(default=0, init=False, repr=False)

    # Tabs

    @property
    def tab_index(self) -> int:
        return self._tab_index

    @property
    def max_tab_index(self) -> int:
        return self._max_tab_index

    def set_tab_index(self, index: int) -> None:
        """Select a tab; the content row selection starts over."""
        self._tab_index = index
        self._content_row_index = 0
        self._max_content_row_index = 0
        self.tab = Tab.from_index(index)

    def set_max_tab_index(self, index: int) -> None:
        self._max_tab_index = index
        if self._tab_index > index:
            self.set_tab_index(index)

    def increment_tab_index(self) -> None:
        """Move to the next tab, wrapping to the first."""
        if self._tab_index == self._max_tab_index:
            self.set_tab_index(0)
        else:
            self.set_tab_index(self._tab_index + 1)

    def decrement_tab_index(self) -> None:
        """Move to the previous tab, wrapping to the last."""
        if self._tab_index == 0:
            self.set_tab_index(self._max_tab_index)
        else:
            self.set_tab_index(self._tab_index - 1)

    # Torrents

    @property
    def torrent_index(self) -> int:
        return self._torrent_index

    @property
    def max_torrent_index(self) -> int:
        return self._max_torrent_index

    def set_torrent_index(self, index: int) -> None:
        self._torrent_index = min(index, self._max_torrent_index)

    def set_max_torrent_index(self, index: int) -> None:
        self._max_torrent_index = index
        if self._torrent_index > index:
            self._torrent_index = index

    def increment_torrent_index(self) -> None:
        if self._torrent_index < self._max_torrent_index:
            self.set_torrent_index(self._torrent_index + 1)

    def decrement_torrent_index(self) -> None:
        if self._torrent_index > 0:
            self.set_torrent_index(self._torrent_index - 1)

    # Content rows of the active tab

    @property
    def content_row_index(self) -> int:
        return self._content_row_index

    @property
    def max_content_row_index(self) -> int:
        return self._max_content_row_index

    def set_content_row_index(self, index: int) -> None:
        self._content_row_index = min(index, self._max_content_row_index)

    def set_max_content_row_index(self, index: int) -> None:
        self._max_content_row_index = index
        if self._content_row_index > index:
            self._content_row_index = index

    def increment_content_row_index(self) -> None:
        if self._content_row_index < self._max_content_row_index:
            self.set_content_row_index(self._content_row_index + 1)

    def decrement_content_row_index(self) -> None:
        if self._content_row_index > 0:
            self.set_content_row_index(self._content_row_index - 1)

    # Command line

    @property
    def is_command_mode(self) -> bool:
        return self._command_mode

    def enter_command_mode(self) -> None:
        self._command_mode = True
        self.clear_command_feedback()

    def exit_command_mode(self) -> None:
        self._command_mode = False
        self._command_suggestion_index = 0

    @property
    def command_input(self) -> str:
        return self._command_input

    def set_command_input(self, text: str) -> None:
        self._command_input = text
        self._command_suggestion_index = 0

    def push_command_char(self, character: str) -> None:
        self._command_input += character
        self._command_suggestion_index = 0
        self.clear_command_feedback()

    def pop_command_char(self) -> None:
        self._command_input = self._command_input[:-1]
        self._command_suggestion_index = 0
        self.clear_command_feedback()

    def clear_command_input(self) -> None:
        self._command_input = ""
        self._command_suggestion_index = 0

    @property
    def command_suggestions(self) -> list[str]:
        return list(self._command_suggestions)

    @property
    def command_suggestion_index(self) -> int:
        return self._command_suggestion_index

    def set_command_suggestions(self, suggestions: list[str]) -> None:
        """Replace the suggestions, keeping the selection within the new list."""
        self._command_suggestions = list(suggestions)
        max_index = max(len(self._command_suggestions) - 1, 0)
        if self._command_suggestion_index > max_index:
            self._command_suggestion_index = max_index

    def increment_command_suggestion_index(self) -> None:
        count = len(self._command_suggestions)
        if count == 0:
            self._command_suggestion_index = 0
            return
        self._command_suggestion_index = (self._command_suggestion_index + 1) % count

    def decrement_command_suggestion_index(self) -> None:
        count = len(self._command_suggestions)
        if count == 0:
            self._command_suggestion_index = 0
            return
        if self._command_suggestion_index == 0:
            self._command_suggestion_index = count - 1
        else:
            self._command_suggestion_index -= 1

    def selected_command_suggestion(self) -> str | None:
        index = self._command_suggestion_index
        if index < len(self._command_suggestions):
            return self._command_suggestions[index]
        return None

    @property
    def command_feedback(self) -> str | None:
        return self._command_feedback

    @property
    def command_feedback_is_error(self) -> bool:
        return self._command_feedback_is_error

    def set_command_feedback(self, message: str, is_error: bool) -> None:
        self._command_feedback = message
        self._command_feedback_is_error = is_error

    def clear_command_feedback(self) -> None:
        self._command_feedback = None
        self._command_feedback_is_error = False

    # Background commands

    def increment_pending_commands(self) -> None:
        self._pending_commands += 1

    def decrement_pending_commands(self) -> None:
        self._pending_commands = max(self._pending_commands - 1, 0)

    def has_pending_commands(self) -> bool:
        return self._pending_commands > 0