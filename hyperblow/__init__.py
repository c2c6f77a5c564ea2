"""Bencode, torrent metadata, magnet URIs, byte-size formatting and command-line and selection state for a torrent client."""

__version__ = "0.1.0"