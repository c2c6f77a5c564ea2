"""Encoding and decoding of bencoded data."""

from __future__ import annotations

import re
from typing import Any

__all__ = ["BencodeError", "decode", "encode"]

_INT_PATTERN = re.compile(rb"i(-?\d+)e")
_LENGTH_PATTERN = re.compile(rb"(\d+):")


class BencodeError(ValueError):
    """Raised when data is not valid bencode or a value cannot be encoded."""


class _Decoder:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def value(self) -> Any:
        if self.pos >= len(self.data):
            raise BencodeError(f"unexpected end of data at offset {self.pos}")
        marker = self.data[self.pos : self.pos + 1]
        if marker == b"i":
            return self.integer()
        if marker == b"l":
            return self.sequence()
        if marker == b"d":
            return self.mapping()
        if marker.isdigit():
            return self.string()
        raise BencodeError(f"unexpected byte {marker!r} at offset {self.pos}")

    def integer(self) -> int:
        match = _INT_PATTERN.match(self.data, self.pos)
        if match is None:
            raise BencodeError(f"malformed integer at offset {self.pos}")
        digits = match.group(1)
        unsigned = digits.lstrip(b"-")
        if digits == b"-0" or (len(unsigned) > 1 and unsigned.startswith(b"0")):
            raise BencodeError(f"non-canonical integer at offset {self.pos}")
        self.pos = match.end()
        return int(digits)

    def string(self) -> bytes:
        match = _LENGTH_PATTERN.match(self.data, self.pos)
        if match is None:
            raise BencodeError(f"malformed string length at offset {self.pos}")
        length = int(match.group(1))
        start = match.end()
        end = start + length
        if end > len(self.data):
            raise BencodeError(f"string at offset {self.pos} runs past end of data")
        self.pos = end
        return self.data[start:end]

    def sequence(self) -> list[Any]:
        self.pos += 1
        items = []
        while self._peek() != b"e":
            items.append(self.value())
        self.pos += 1
        return items

    def mapping(self) -> dict[bytes, Any]:
        self.pos += 1
        result: dict[bytes, Any] = {}
        while self._peek() != b"e":
            if not self._peek().isdigit():
                raise BencodeError(f"dictionary key at offset {self.pos} is not a string")
            key = self.string()
            result[key] = self.value()
        self.pos += 1
        return result

    def _peek(self) -> bytes:
        if self.pos >= len(self.data):
            raise BencodeError("unexpected end of data inside a list or dictionary")
        return self.data[self.pos : self.pos + 1]


def decode(data: bytes) -> Any:
    """Decode one bencoded value occupying all of ``data``.

    Strings come back as bytes, dictionaries with bytes keys.
    """
    decoder = _Decoder(bytes(data))
    value = decoder.value()
    if decoder.pos != len(decoder.data):
        raise BencodeError(f"trailing data at offset {decoder.pos}")
    return value


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _encode_into(value: Any, out: list[bytes]) -> None:
    if isinstance(value, bool):
        raise BencodeError("booleans cannot be bencoded")
    if isinstance(value, int):
        out.append(b"i%de" % value)
    elif isinstance(value, (bytes, bytearray, str)):
        raw = _as_bytes(value)
        out.append(b"%d:" % len(raw))
        out.append(raw)
    elif isinstance(value, (list, tuple)):
        out.append(b"l")
        for item in value:
            _encode_into(item, out)
        out.append(b"e")
    elif isinstance(value, dict):
        out.append(b"d")
        items = []
        for key, item in value.items():
            if not isinstance(key, (bytes, bytearray, str)):
                raise BencodeError(f"dictionary key {key!r} is not a string")
            items.append((_as_bytes(key), item))
        for key, item in sorted(items, key=lambda pair: pair[0]):
            _encode_into(key, out)
            _encode_into(item, out)
        out.append(b"e")
    else:
        raise BencodeError(f"cannot bencode value of type {type(value).__name__}")


def encode(value: Any) -> bytes:
    """Bencode ``value``; dictionary keys are written in sorted order."""
    out: list[bytes] = []
    _encode_into(value, out)
    return b"".join(out)