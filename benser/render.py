"""Helpers for drawing layout boxes: coordinate mapping, colour conversion, buffer sizing."""

from __future__ import annotations

import enum


class TextureFormat(enum.Enum):
    """Pixel formats a render target may use."""

    RGBA8_UNORM = "rgba8unorm"
    RGBA8_UNORM_SRGB = "rgba8unorm-srgb"
    BGRA8_UNORM = "bgra8unorm"
    BGRA8_UNORM_SRGB = "bgra8unorm-srgb"


def round_up_to_multiple(number: int, multiple: int) -> int:
    """Round ``number`` up to the nearest multiple of ``multiple``; 0 leaves it unchanged."""
    if number < 0 or multiple < 0:
        raise ValueError("number and multiple must not be negative")
    if multiple == 0:
        return number
    remainder = number % multiple
    if remainder == 0:
        return number
    return number + multiple - remainder


def point(x: float, y: float, screen: tuple[float, float]) -> tuple[float, float]:
    """Map pixel coordinates on a screen of the given size to clip space (-1..1, y up)."""
    width, height = screen
    new_x = -1.0 + x * (2.0 / width)
    new_y = 1.0 - y * (2.0 / height)
    return (new_x, new_y)


def _channel(value: int) -> float:
    return (value & 0xFF) / 255.0


def _srgb_to_linear(value: int) -> float:
    x = _channel(value)
    if x > 0.04045:
        return ((x + 0.055) / 1.055) ** 2.4
    return x / 12.92


def hex_to_linear_rgba(c: int) -> tuple[float, float, float, float]:
    """Convert a 0xRRGGBB colour to linear RGBA channels; alpha is always 1."""
    return (_srgb_to_linear(c >> 16), _srgb_to_linear(c >> 8), _srgb_to_linear(c), 1.0)


def hex_to_linear_bgra(c: int) -> tuple[float, float, float, float]:
    """Convert a 0xRRGGBB colour to linear BGRA channels; alpha is always 1."""
    return (_srgb_to_linear(c), _srgb_to_linear(c >> 8), _srgb_to_linear(c >> 16), 1.0)


def native_color(c: int, texture_format: TextureFormat) -> tuple[float, float, float, float]:
    """Convert a 0xRRGGBB colour to the channel values a texture format expects."""
    if texture_format is TextureFormat.RGBA8_UNORM_SRGB:
        return hex_to_linear_rgba(c)
    if texture_format is TextureFormat.BGRA8_UNORM_SRGB:
        return hex_to_linear_bgra(c)
    return (_channel(c >> 16), _channel(c >> 8), _channel(c), 1.0)