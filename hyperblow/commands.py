"""Parsing, completion and messages for the interactive command line."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .magnet import is_valid_magnet

__all__ = [
    "ActionKind",
    "CommandAction",
    "CommandInputError",
    "CommandResult",
    "split_command",
    "parse_command",
    "suggestions",
    "display_suggestion",
    "pending_message",
    "file_suggestions",
    "expand_env_vars",
    "expand_path",
]

_COMMANDS = ("file ", "magnet ", "q", "quit")
_MAGNET_HINT = "magnet magnet:?xt=urn:btih:"
_ENV_PATTERN = re.compile(r"\$(?:\{([^}]*)\}?|([A-Za-z0-9_]*))")


def _ascii_lower(text: str) -> str:
    return "".join(char.lower() if char.isascii() else char for char in text)


class ActionKind(Enum):
    """What a parsed command asks for."""

    FILE = "file"
    MAGNET = "magnet"
    QUIT = "quit"


@dataclass(frozen=True)
class CommandAction:
    """A command that parsed successfully."""

    kind: ActionKind
    path: Path | None = None
    uri: str | None = None

    @classmethod
    def file(cls, path: str | Path) -> CommandAction:
        return cls(ActionKind.FILE, path=Path(path))

    @classmethod
    def magnet(cls, uri: str) -> CommandAction:
        return cls(ActionKind.MAGNET, uri=uri)

    @classmethod
    def quit(cls) -> CommandAction:
        return cls(ActionKind.QUIT)


class CommandInputError(ValueError):
    """Raised when command input cannot be turned into an action.

    ``code`` names the kind of problem; ``argument`` holds the offending
    command or path where there is one.
    """

    EMPTY = "empty"
    UNKNOWN_COMMAND = "unknown_command"
    MISSING_FILE_PATH = "missing_file_path"
    FILE_NOT_FOUND = "file_not_found"
    PATH_IS_NOT_FILE = "path_is_not_file"
    MISSING_MAGNET_URI = "missing_magnet_uri"
    INVALID_MAGNET_URI = "invalid_magnet_uri"

    _MESSAGES = {
        EMPTY: "type :file <path>, :magnet <uri>, :q, or :quit",
        UNKNOWN_COMMAND: "unknown command :{}",
        MISSING_FILE_PATH: "missing path: use :file <path-to-torrent>",
        FILE_NOT_FOUND: "file does not exist: {}",
        PATH_IS_NOT_FILE: "path is not a file: {}",
        MISSING_MAGNET_URI: "missing magnet URI: use :magnet <uri>",
        INVALID_MAGNET_URI: "invalid magnet URI",
    }

    def __init__(self, code: str, argument: str | None = None) -> None:
        self.code = code
        self.argument = argument
        super().__init__(self._MESSAGES[code].format(argument))


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running a command in the background.

    ``input`` is set only when the command failed, so it can be offered again.
    """

    message: str
    input: str | None = None

    @classmethod
    def loaded(cls, message: str) -> CommandResult:
        return cls(message)

    @classmethod
    def failed(cls, input: str, message: str) -> CommandResult:
        return cls(message, input)

    @property
    def is_failure(self) -> bool:
        return self.input is not None


def split_command(text: str) -> tuple[str, str]:
    """Split at the first whitespace into command word and trimmed-left argument."""
    for index, char in enumerate(text):
        if char.isspace():
            return text[:index], text[index:].lstrip()
    return text, ""


def parse_command(text: str) -> CommandAction:
    """Parse a command line such as ``file <path>``, ``magnet <uri>`` or ``q``."""
    text = text.strip()
    if not text:
        raise CommandInputError(CommandInputError.EMPTY)
    command, argument = split_command(text)
    command = _ascii_lower(command)
    if command == "file":
        return _parse_file(argument)
    if command == "magnet":
        return _parse_magnet(argument)
    if command in ("q", "quit"):
        return CommandAction.quit()
    raise CommandInputError(CommandInputError.UNKNOWN_COMMAND, command)


def _parse_file(argument: str) -> CommandAction:
    argument = argument.strip()
    if not argument:
        raise CommandInputError(CommandInputError.MISSING_FILE_PATH)
    path = expand_path(argument)
    if not path.exists():
        raise CommandInputError(CommandInputError.FILE_NOT_FOUND, str(path))
    if not path.is_file():
        raise CommandInputError(CommandInputError.PATH_IS_NOT_FILE, str(path))
    return CommandAction.file(path)


def _parse_magnet(argument: str) -> CommandAction:
    uri = argument.strip()
    if not uri:
        raise CommandInputError(CommandInputError.MISSING_MAGNET_URI)
    if not is_valid_magnet(uri):
        raise CommandInputError(CommandInputError.INVALID_MAGNET_URI)
    return CommandAction.magnet(uri)


def suggestions(text: str, limit: int) -> list[str]:
    """Completions for partially typed command input."""
    text = text.lstrip()
    if not text:
        return list(_COMMANDS)
    if not any(char.isspace() for char in text):
        return [command for command in _COMMANDS if command.rstrip().startswith(text)]
    command, argument = split_command(text)
    command = _ascii_lower(command)
    if command == "file":
        return file_suggestions(argument, limit)
    if command == "magnet":
        return [_MAGNET_HINT]
    return []


def display_suggestion(text: str, suggestion: str) -> str:
    """How a suggestion is shown for the current input."""
    command, _ = split_command(text.lstrip())
    command = _ascii_lower(command)
    if command in ("file", "magnet"):
        prefix = f"{command} "
        return suggestion[len(prefix):] if suggestion.startswith(prefix) else suggestion
    return f":{suggestion}"


def pending_message(action: CommandAction) -> str:
    """Status line shown while an action is being carried out."""
    if action.kind is ActionKind.FILE:
        return f"Opening {action.path}..."
    if action.kind is ActionKind.MAGNET:
        return "Opening magnet URI..."
    return "Quitting..."


@dataclass(frozen=True)
class _CompletionQuery:
    directory: Path
    display_parent: str
    prefix: str


def _completion_query(argument: str) -> _CompletionQuery | None:
    argument = argument.lstrip()
    if not argument:
        try:
            return _CompletionQuery(Path.cwd(), "", "")
        except OSError:
            return None

    expanded = expand_path(argument)
    if argument.endswith("/") or expanded.is_dir():
        parent = argument if argument.endswith("/") else f"{argument}/"
        return _CompletionQuery(expanded, parent, "")

    slash = argument.rfind("/")
    display_parent = argument[: slash + 1] if slash >= 0 else ""
    prefix = argument[slash + 1:] if slash >= 0 else argument
    return _CompletionQuery(expand_path(display_parent or "."), display_parent, prefix)


def file_suggestions(argument: str, limit: int) -> list[str]:
    """``file ...`` completions: directories first, then torrents, then by name."""
    query = _completion_query(argument)
    if query is None:
        return []
    try:
        with os.scandir(query.directory) as entries:
            candidates = []
            for entry in entries:
                name = entry.name
                if not name.startswith(query.prefix):
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    continue
                candidates.append(
                    (
                        not is_dir,
                        not name.endswith(".torrent"),
                        _ascii_lower(name),
                        f"file {query.display_parent}{name}{'/' if is_dir else ''}",
                    )
                )
    except OSError:
        return []
    candidates.sort(key=lambda item: item[:3])
    return [item[3] for item in candidates[:limit]]


def _replace_variable(match: re.Match[str]) -> str:
    braced, bare = match.group(1), match.group(2)
    if braced is not None:
        if not braced:
            return "${}"
        value = os.environ.get(braced)
        return value if value is not None else f"${{{braced}}}"
    if not bare:
        return "$"
    value = os.environ.get(bare)
    return value if value is not None else f"${bare}"


def expand_env_vars(path: str) -> str:
    """Replace ``$NAME`` and ``${NAME}`` with environment values; unknown ones stay."""
    return _ENV_PATTERN.sub(_replace_variable, path)


def expand_path(path: str) -> Path:
    """Expand environment variables and a leading ``~`` in ``path``."""
    expanded = expand_env_vars(path)
    home = os.environ.get("HOME")
    if expanded == "~":
        return Path(home) if home is not None else Path(expanded)
    if expanded.startswith("~/"):
        return Path(home) / expanded[2:] if home is not None else Path(expanded)
    return Path(expanded)