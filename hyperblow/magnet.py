"""Parsing of magnet URIs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote

__all__ = ["MagnetError", "MagnetURI", "is_valid_magnet"]

_PREFIX = "magnet:?"
_XT_PATTERN = re.compile(r"urn:([^:]+):(.+)")
_LENGTH_PATTERN = re.compile(r"\+?\d+")


class MagnetError(ValueError):
    """Raised when a string is not a magnet URI."""

    def __init__(self, message: str = "Invalid magnet URI") -> None:
        super().__init__(message)


def _decode_value(value: str) -> str:
    return unquote(value.replace("+", " "), errors="replace")


def _parse_length(value: str) -> int | None:
    if not _LENGTH_PATTERN.fullmatch(value):
        return None
    length = int(value)
    return length if length < 2**64 else None


def _parse_params(uri: str) -> list[tuple[str, str]]:
    if not uri.startswith(_PREFIX):
        raise MagnetError()
    params = []
    for part in uri[len(_PREFIX) :].split("&"):
        if not part:
            continue
        key, _, value = part.partition("=")
        params.append((key, value))
    return params


@dataclass(frozen=True)
class MagnetURI:
    """The fields of a magnet URI.

    ``xt`` is the exact topic (``urn:<hash type>:<hash>``), ``dn`` the display
    name, ``xl`` the exact length in bytes and ``tr`` the tracker URLs.
    """

    xt: str | None = None
    dn: str | None = None
    xl: int | None = None
    tr: tuple[str, ...] = ()
    ws: str | None = None
    acceptable_source: str | None = None
    xs: str | None = None
    kt: str | None = None
    mt: str | None = None

    @classmethod
    def parse(cls, uri: str) -> MagnetURI:
        """Parse ``uri``; display name and trackers are percent-decoded."""
        params = _parse_params(uri)
        first: dict[str, str] = {}
        trackers = []
        for key, value in params:
            if key == "tr":
                trackers.append(_decode_value(value))
            else:
                first.setdefault(key, value)

        xt = None
        if "xt" in first:
            match = _XT_PATTERN.fullmatch(first["xt"])
            if match:
                xt = f"urn:{match.group(1)}:{match.group(2)}"

        return cls(
            xt=xt,
            dn=_decode_value(first["dn"]) if "dn" in first else None,
            xl=_parse_length(first["xl"]) if "xl" in first else None,
            tr=tuple(trackers),
            ws=first.get("ws"),
            acceptable_source=first.get("as"),
            xs=first.get("xs"),
            kt=first.get("kt"),
            mt=first.get("mt"),
        )


def is_valid_magnet(uri: str) -> bool:
    """Whether ``uri`` parses as a magnet URI."""
    try:
        MagnetURI.parse(uri)
    except MagnetError:
        return False
    return True