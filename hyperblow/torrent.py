"""Metadata of ``.torrent`` files."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .bencode import BencodeError, decode, encode

__all__ = ["TorrentFileError", "FileEntry", "InfoDict", "TorrentMeta"]

PIECE_HASH_LENGTH = 20


class TorrentFileError(Exception):
    """Raised when a torrent file cannot be read, decoded or interpreted."""


class _SchemaError(Exception):
    pass


def _text(value: Any, name: str) -> str:
    if not isinstance(value, bytes):
        raise _SchemaError(f"field {name!r} must be a string")
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as err:
        raise _SchemaError(f"field {name!r} is not valid UTF-8") from err


def _integer(value: Any, name: str) -> int:
    if not isinstance(value, int):
        raise _SchemaError(f"field {name!r} must be an integer")
    if not -(2**63) <= value < 2**63:
        raise _SchemaError(f"field {name!r} does not fit in 64 bits")
    return value


def _list(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        raise _SchemaError(f"field {name!r} must be a list")
    return value


def _dict(value: Any, name: str) -> dict[bytes, Any]:
    if not isinstance(value, dict):
        raise _SchemaError(f"field {name!r} must be a dictionary")
    return value


def _optional(mapping: dict[bytes, Any], key: bytes, convert) -> Any:
    if key not in mapping:
        return None
    return convert(mapping[key], key.decode("utf-8", "replace"))


def _required(mapping: dict[bytes, Any], key: bytes) -> Any:
    if key not in mapping:
        raise _SchemaError(f"missing field {key.decode('utf-8', 'replace')!r}")
    return mapping[key]


@dataclass(frozen=True)
class FileEntry:
    """One file of a multi-file torrent."""

    length: int
    path: tuple[str, ...]
    md5sum: str | None = None

    @classmethod
    def _from_bencode(cls, value: Any) -> FileEntry:
        mapping = _dict(value, "files")
        return cls(
            length=_integer(_required(mapping, b"length"), "length"),
            path=tuple(_text(part, "path") for part in _list(_required(mapping, b"path"), "path")),
            md5sum=_optional(mapping, b"md5sum", _text),
        )


@dataclass(frozen=True)
class InfoDict:
    """The ``info`` dictionary, from which the info hash is computed."""

    pieces: bytes
    name: str | None = None
    length: int | None = None
    files: tuple[FileEntry, ...] | None = None
    piece_length: int | None = None

    @classmethod
    def _from_bencode(cls, value: Any) -> InfoDict:
        mapping = _dict(value, "info")
        pieces = _required(mapping, b"pieces")
        if not isinstance(pieces, bytes):
            raise _SchemaError("field 'pieces' must be a byte string")
        files = None
        if b"files" in mapping:
            files = tuple(FileEntry._from_bencode(entry) for entry in _list(mapping[b"files"], "files"))
        return cls(
            pieces=pieces,
            name=_optional(mapping, b"name", _text),
            length=_optional(mapping, b"length", _integer),
            files=files,
            piece_length=_optional(mapping, b"piece length", _integer),
        )

    def _to_bencode(self) -> dict[bytes, Any]:
        result: dict[bytes, Any] = {b"pieces": self.pieces}
        if self.name is not None:
            result[b"name"] = self.name
        if self.length is not None:
            result[b"length"] = self.length
        if self.files is not None:
            entries = []
            for entry in self.files:
                encoded: dict[bytes, Any] = {b"length": entry.length, b"path": list(entry.path)}
                if entry.md5sum is not None:
                    encoded[b"md5sum"] = entry.md5sum
                entries.append(encoded)
            result[b"files"] = entries
        if self.piece_length is not None:
            result[b"piece length"] = self.piece_length
        return result


def _announce_list(value: Any, name: str) -> tuple[tuple[str, ...], ...]:
    return tuple(tuple(_text(url, name) for url in _list(tier, name)) for tier in _list(value, name))


@dataclass(frozen=True)
class TorrentMeta:
    """Everything held in a bencoded ``.torrent`` file."""

    announce: str
    info: InfoDict
    announce_list: tuple[tuple[str, ...], ...] | None = None
    creation_date: int | None = None
    comment: str | None = None
    encoding: str | None = None
    created_by: str | None = None
    acceptable_source: str | None = field(default=None)

    @classmethod
    def from_path(cls, path: str | Path) -> TorrentMeta:
        """Read and parse the torrent file at ``path``."""
        try:
            data = Path(path).read_bytes()
        except OSError as err:
            raise TorrentFileError(f"InvalidFile - path : {str(path)!r}, error : {err}") from err
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> TorrentMeta:
        """Parse the raw bytes of a torrent file."""
        try:
            root = _dict(decode(data), "root")
            return cls(
                announce=_text(_required(root, b"announce"), "announce"),
                info=InfoDict._from_bencode(_required(root, b"info")),
                announce_list=_optional(root, b"announce-list", _announce_list),
                creation_date=_optional(root, b"creation date", _integer),
                comment=_optional(root, b"comment", _text),
                encoding=_optional(root, b"encoding", _text),
                created_by=_optional(root, b"created by", _text),
                acceptable_source=_optional(root, b"acceptable_source", _text),
            )
        except (BencodeError, _SchemaError) as err:
            raise TorrentFileError(f"InvalidEncoding - encoding : Bencode, error : {err}") from err

    def info_hash(self) -> bytes:
        """SHA-1 digest of the bencoded info dictionary."""
        return hashlib.sha1(encode(self.info._to_bencode())).digest()

    def total_length(self) -> int:
        """Size of the content in bytes: ``length``, else the sum over ``files``, else 0."""
        if self.info.length is not None:
            return self.info.length
        if self.info.files is not None:
            return sum(entry.length for entry in self.info.files)
        return 0

    def piece_count(self) -> int:
        """Number of complete 20-byte piece hashes."""
        return len(self.info.pieces) // PIECE_HASH_LENGTH

    def piece_hashes(self) -> list[bytes]:
        """The 20-byte SHA-1 hash of each piece, in order."""
        pieces = self.info.pieces
        if len(pieces) % PIECE_HASH_LENGTH:
            raise TorrentFileError(
                "InvalidPiecesLength - pieces length must be a multiple of 20 bytes, "
                f"got {len(pieces)}"
            )
        return [pieces[start : start + PIECE_HASH_LENGTH] for start in range(0, len(pieces), PIECE_HASH_LENGTH)]