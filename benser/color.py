"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour; every channel is an integer in 0..255."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel {name} must be an int in 0..255, got {channel!r}")