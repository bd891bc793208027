"""Parsing of textual display specifications such as "1080p@60hz"."""

from __future__ import annotations

import re

from .display import DisplaySpec

_U32_MAX = 0xFFFFFFFF

_WIDTH_HEIGHT = re.compile(r"([0-9]+)x([0-9]+)")
_HEIGHT_P = re.compile(r"([0-9]+)p")
_K = re.compile(r"([0-9]+)k")
_HEIGHT_I = re.compile(r"([0-9]+)i?")
_ASPECT = re.compile(r"([0-9]+):([0-9]+)")
_HZ = re.compile(r"([0-9]*\.?[0-9]+)hz")
_FPS = re.compile(r"([0-9]*\.?[0-9]+)fps")

_K_RESOLUTIONS = {
    2: (2048, 1080),
    4: (3840, 2160),
    8: (7680, 4320),
}

_KNOWN_WIDTHS = {
    480: 640,
    576: 768,
    720: 1280,
    1080: 1920,
    1440: 2560,
    2160: 3840,
    4320: 7680,
}


class SpecParseError(ValueError):
    """Raised when a display specification cannot be parsed."""


def _to_u32(text: str) -> int:
    value = int(text)
    if value > _U32_MAX:
        raise SpecParseError(f"number too large: {text}")
    return value


def calculate_width_from_height(height: int) -> int:
    """Return the usual width for ``height``, defaulting to 16:9."""
    return _KNOWN_WIDTHS.get(height, (height * 16) // 9)


def parse_resolution(resolution: str) -> tuple[int, int]:
    """Parse "WxH", "Np", "Nk", "Ni" or "N" into (width, height)."""
    if match := _WIDTH_HEIGHT.fullmatch(resolution):
        return _to_u32(match[1]), _to_u32(match[2])

    if match := _HEIGHT_P.fullmatch(resolution):
        height = _to_u32(match[1])
        return calculate_width_from_height(height), height

    if match := _K.fullmatch(resolution):
        k = _to_u32(match[1])
        try:
            return _K_RESOLUTIONS[k]
        except KeyError:
            raise SpecParseError(f"Unsupported K resolution: {k}k") from None

    if match := _HEIGHT_I.fullmatch(resolution):
        height = _to_u32(match[1])
        return calculate_width_from_height(height), height

    raise SpecParseError(f"Unable to parse resolution: {resolution}")


def parse_aspect_ratio(aspect: str) -> tuple[int, int]:
    """Parse "W:H" into a pair of ratio terms."""
    if match := _ASPECT.fullmatch(aspect):
        return _to_u32(match[1]), _to_u32(match[2])
    raise SpecParseError(f"Unable to parse aspect ratio: {aspect}")


def parse_refresh_rate(rate: str) -> float:
    """Parse "<n>hz" or "<n>fps" into a refresh rate."""
    for pattern in (_HZ, _FPS):
        if match := pattern.fullmatch(rate):
            return float(match[1])
    raise SpecParseError(f"Unable to parse refresh rate: {rate}")


def parse_display_spec(spec: str) -> DisplaySpec:
    """Parse a full specification such as "1920x1080@60hz" or "16:9@120fps"."""
    spec = spec.strip().lower()
    parts = spec.split("@")
    resolution_part = parts[0]
    refresh_rate = parse_refresh_rate(parts[1]) if len(parts) > 1 else None

    try:
        width, height = parse_resolution(resolution_part)
    except SpecParseError:
        pass
    else:
        return DisplaySpec(width=width, height=height, refresh_rate=refresh_rate)

    try:
        ratio = parse_aspect_ratio(resolution_part)
    except SpecParseError:
        pass
    else:
        return DisplaySpec(refresh_rate=refresh_rate, aspect_ratio=ratio)

    raise SpecParseError(f"Unable to parse display specification: {spec}")