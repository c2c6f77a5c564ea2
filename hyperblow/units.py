"""Human-readable byte sizes."""

from __future__ import annotations

import struct

__all__ = ["human_readable"]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def human_readable(size: int) -> str:
    """Format ``size`` bytes as KiB, MiB or GiB with two decimals."""
    if size < 0:
        raise ValueError("size must not be negative")
    kibibytes = _f32(_f32(float(size)) / 1024.0)
    if kibibytes < 1024.0:
        return f"{kibibytes:.2f} KiB"
    mebibytes = _f32(kibibytes / 1024.0)
    if mebibytes < 1024.0:
        return f"{mebibytes:.2f} MiB"
    gibibytes = _f32(mebibytes / 1024.0)
    return f"{gibibytes:.2f} GiB"