# hyperblow

This package holds the parts of a terminal BitTorrent client that do not depend on a screen or a network. It uses only the standard library.

## Modules

### `hyperblow.bencode`

- `decode(data)` decodes one bencoded value. The value must take up the whole input. Strings come back as `bytes`, and dictionaries come back with `bytes` keys.
- `encode(value)` accepts `int`, `bytes` or `str`, `list` or `tuple`, and `dict` with string keys. Dictionary keys are written in sorted order.
- Malformed input raises `BencodeError`, a subclass of `ValueError`. So do values that cannot be encoded, and non-canonical integers such as `i-0e` or `i03e`.

### `hyperblow.torrent`

- `TorrentMeta.from_path(path)` and `TorrentMeta.from_bytes(data)` parse `.torrent` metadata into frozen dataclasses.
  - `TorrentMeta` has these fields: `announce`, `info`, `announce_list`, `creation_date`, `comment`, `encoding`, `created_by` and `acceptable_source`.
  - `InfoDict` has these fields: `pieces`, `name`, `length`, `files` and `piece_length`.
  - `FileEntry` has these fields: `length`, `path` and `md5sum`.
- `info_hash()` returns the 20-byte SHA-1 digest of the re-encoded info dictionary.
- `total_length()` returns the single-file `length`. If that is absent, it returns the sum of the `files` lengths. Otherwise it returns 0.
- `piece_count()` returns the number of whole 20-byte hashes in `pieces`.
- `piece_hashes()` returns the list of 20-byte piece hashes.
- `TorrentFileError` is raised in these cases:
  - the file cannot be read;
  - the data is not valid bencode;
  - the data lacks the required fields;
  - `pieces` is not a multiple of 20 bytes. This case is raised by `piece_hashes()`.

### `hyperblow.magnet`

- `MagnetURI.parse(uri)` reads a `magnet:?` link into `xt`, `dn`, `xl`, `tr`, `ws`, `acceptable_source` (the `as` parameter), `xs`, `kt` and `mt`.
  - `dn` and every tracker in `tr` are percent-decoded, and `+` becomes a space.
  - `xl` becomes an `int`.
- A string that does not start with `magnet:?` raises `MagnetError`.
- `is_valid_magnet(uri)` returns `True` if `MagnetURI.parse` accepts the string, and `False` otherwise.

### `hyperblow.units`

`human_readable(size)` formats a byte count as `KiB`, `MiB` or `GiB` with two decimals, for example `"1.00 KiB"`. Negative sizes raise `ValueError`.

### `hyperblow.commands`

This module handles the command line that a user types into the interface. It accepts `file <path>`, `magnet <uri>`, `q` and `quit`.

- `parse_command(text)` returns a `CommandAction`, which carries an `ActionKind` (`FILE`, `MAGNET` or `QUIT`) and a `path` or `uri`. Bad input raises `CommandInputError`.
  - `.code` says what was wrong, for example `CommandInputError.UNKNOWN_COMMAND` or `CommandInputError.FILE_NOT_FOUND`.
  - The exception message is the text the interface shows.
- `suggestions(text, limit)` completes partial input:
  - command names;
  - a magnet prefix;
  - for `file`, entries of the named directory via `file_suggestions(argument, limit)`. Directories come first, then `.torrent` files, then the rest by name.
- `display_suggestion(text, suggestion)` returns how a suggestion is shown for the current input.
- `pending_message(action)` returns the status line shown while an action runs.
- `split_command(text)` splits at the first whitespace.
- `expand_env_vars(path)` replaces `$NAME` and `${NAME}` with their values. Unknown variables are left as written.
- `expand_path(path)` also expands a leading `~`.
- `CommandResult` records the outcome of a background command. `CommandResult.loaded(message)` records a success, and `CommandResult.failed(input, message)` records a failure. `is_failure` tells the two apart.

### `hyperblow.state`

`TUIState` holds the interface's selections:

- the tab index, which wraps around and maps to the `Tab` enum;
- the torrent index and the content-row index, each clamped to its maximum;
- the command-line input, suggestions and selected suggestion;
- the feedback message and whether it is an error;
- a count of pending background commands;
- a `Mouse` with its position and `MouseState`.

The `engine` attribute stores whatever object the caller passes in.

### `hyperblow.trackers`

- `tracker_viewport_start(selected_index, total_rows, visible_rows)` returns the first row of a scrolled list that keeps the selection visible.
- `visible_tracker_indexes(...)` returns the `range` of rows shown.

## Example

```python
from hyperblow.torrent import TorrentMeta
from hyperblow.magnet import MagnetURI
from hyperblow.units import human_readable
from hyperblow.commands import parse_command, suggestions
from hyperblow.trackers import tracker_viewport_start

meta = TorrentMeta.from_path("example.torrent")
print(meta.info.name, human_readable(meta.total_length()), meta.info_hash().hex())

link = MagnetURI.parse("magnet:?xt=urn:btih:08ada5a7a6183aae1e09d831df6748d566095a10&dn=Example")
print(link.xt, link.dn)

print(parse_command("quit").kind)      # ActionKind.QUIT
print(suggestions("qu", 8))            # ['quit']
print(tracker_viewport_start(12, 13, 6))  # 7
```

## What it does not do

- The package draws nothing on a terminal.
- It does not read keyboard or mouse events, and it does not work out screen layout or which tab or row lies under the pointer.
- It connects to no trackers or peers and downloads nothing. Running a parsed `CommandAction` is up to the caller, and so is filling in a `CommandResult`.
- It installs no command to run.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```