"""Display specifications, concrete display modes and mode selection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

RATE_TOLERANCE = 0.1


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    while b:
        a, b = b, a % b
    return a


def _reduced_ratio(width: int, height: int) -> tuple[int, int]:
    divisor = gcd(width, height)
    return width // divisor, height // divisor


def format_rate(rate: float) -> str:
    """Format a refresh rate without a trailing ".0" for whole numbers."""
    rate = float(rate)
    if rate.is_integer():
        return str(int(rate))
    return repr(rate)


@dataclass(frozen=True)
class DisplayMode:
    """A concrete mode a display can run in."""

    width: int
    height: int
    refresh_rate: float

    def matches_filter(self, filter: DisplaySpec) -> bool:
        """Return True if this mode satisfies every field set in ``filter``."""
        if filter.width is not None and filter.height is not None:
            if (self.width, self.height) != (filter.width, filter.height):
                return False

        if filter.aspect_ratio is not None:
            if _reduced_ratio(self.width, self.height) != tuple(filter.aspect_ratio):
                return False

        if filter.refresh_rate is not None:
            if abs(self.refresh_rate - filter.refresh_rate) > RATE_TOLERANCE:
                return False

        return True

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this mode."""
        return {
            "width": self.width,
            "height": self.height,
            "refresh_rate": float(self.refresh_rate),
        }

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@{format_rate(self.refresh_rate)}hz"


@dataclass(frozen=True)
class DisplaySpec:
    """A possibly partial description of the wanted display mode."""

    width: int | None = None
    height: int | None = None
    refresh_rate: float | None = None
    aspect_ratio: tuple[int, int] | None = None

    def _resolution(self) -> tuple[int, int] | None:
        if self.width is not None and self.height is not None:
            return self.width, self.height
        return None

    def matches_filter(self, filter: DisplaySpec) -> bool:
        """Return True if this spec does not contradict ``filter``."""
        resolution = self._resolution()
        filter_resolution = filter._resolution()
        if filter_resolution is not None and resolution is not None:
            if resolution != filter_resolution:
                return False

        if filter.aspect_ratio is not None and resolution is not None:
            if _reduced_ratio(*resolution) != tuple(filter.aspect_ratio):
                return False

        if filter.refresh_rate is not None and self.refresh_rate is not None:
            if abs(self.refresh_rate - filter.refresh_rate) > RATE_TOLERANCE:
                return False

        return True

    def matches_exact(self, other: DisplaySpec) -> bool:
        """Return True if ``other`` satisfies every field set in this spec."""
        resolution = self._resolution()
        other_resolution = other._resolution()
        if resolution is not None and other_resolution is not None:
            if resolution != other_resolution:
                return False

        if self.aspect_ratio is not None and other_resolution is not None:
            if tuple(self.aspect_ratio) != _reduced_ratio(*other_resolution):
                return False

        if self.refresh_rate is not None and other.refresh_rate is not None:
            if abs(self.refresh_rate - other.refresh_rate) > RATE_TOLERANCE:
                return False

        return True

    def to_concrete_spec(self, available_modes: Sequence[DisplayMode]) -> DisplayMode | None:
        """Pick the available mode that best fits this spec, or None."""
        resolution = self._resolution()
        if resolution is not None:
            return self._best_mode_for_resolution(available_modes, *resolution)

        if self.aspect_ratio is not None:
            wanted = tuple(self.aspect_ratio)
            matching = [
                mode
                for mode in available_modes
                if _reduced_ratio(mode.width, mode.height) == wanted
            ]
            return self._best_mode_by_refresh_rate(matching)

        return None

    def _best_mode_for_resolution(
        self, available_modes: Sequence[DisplayMode], width: int, height: int
    ) -> DisplayMode | None:
        exact = [m for m in available_modes if (m.width, m.height) == (width, height)]
        if exact:
            return self._best_mode_by_refresh_rate(exact)

        if not available_modes:
            return None
        return min(
            available_modes,
            key=lambda m: math.hypot(m.width - width, m.height - height),
        )

    def _best_mode_by_refresh_rate(self, modes: Sequence[DisplayMode]) -> DisplayMode | None:
        if not modes:
            return None

        def by_rate(mode: DisplayMode) -> float:
            return mode.refresh_rate

        def last_max(candidates: Iterable[DisplayMode]) -> DisplayMode:
            # Among equal rates the later mode wins.
            return max(reversed(list(candidates)), key=by_rate)

        target = self.refresh_rate
        if target is None:
            return last_max(modes)

        for mode in modes:
            if abs(mode.refresh_rate - target) < RATE_TOLERANCE:
                return mode

        higher = [m for m in modes if m.refresh_rate > target]
        if higher:
            return min(higher, key=by_rate)

        lower = [m for m in modes if m.refresh_rate < target]
        if lower:
            return last_max(lower)

        return modes[0]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of this spec."""
        return {
            "width": self.width,
            "height": self.height,
            "refresh_rate": None if self.refresh_rate is None else float(self.refresh_rate),
            "aspect_ratio": None if self.aspect_ratio is None else list(self.aspect_ratio),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DisplaySpec:
        """Build a spec from a mapping as produced by :meth:`to_dict`."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        aspect = data.get("aspect_ratio")
        if aspect is not None:
            if len(aspect) != 2:
                raise ValueError(f"aspect_ratio must have two items: {aspect!r}")
            aspect = (int(aspect[0]), int(aspect[1]))
        rate = data.get("refresh_rate")
        width = data.get("width")
        height = data.get("height")
        return cls(
            width=None if width is None else int(width),
            height=None if height is None else int(height),
            refresh_rate=None if rate is None else float(rate),
            aspect_ratio=aspect,
        )

    def __str__(self) -> str:
        resolution = self._resolution()
        if resolution is not None:
            head = f"{resolution[0]}x{resolution[1]}"
        elif self.aspect_ratio is not None:
            head = f"{self.aspect_ratio[0]}:{self.aspect_ratio[1]}"
        else:
            head = ""

        if self.refresh_rate is not None:
            rate = f"{format_rate(self.refresh_rate)}hz"
            return f"{head}@{rate}" if head else rate
        return head