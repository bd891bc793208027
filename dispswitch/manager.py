"""Choosing and applying display modes for a specification."""

from __future__ import annotations

from typing import Sequence

from .display import DisplayMode, DisplaySpec
from .platform import DisplayError, PlatformDisplayManager


class DisplayManager:
    """Selects a mode for a spec and applies it through the platform layer."""

    def __init__(self, platform_manager: PlatformDisplayManager | None = None) -> None:
        self.platform_manager = (
            platform_manager if platform_manager is not None else PlatformDisplayManager()
        )

    def switch_display(self, spec: DisplaySpec, exact: bool = False) -> DisplayMode:
        """Switch to the mode chosen for ``spec`` and return it."""
        available_modes = self.platform_manager.get_available_modes()
        if exact:
            target = self.find_exact_match(spec, available_modes)
        else:
            target = spec.to_concrete_spec(available_modes)

        if target is None:
            raise DisplayError(f"No suitable display mode found for specification: {spec}")

        self.platform_manager.set_display_mode(target)
        return target

    def list_available_modes(self) -> list[DisplayMode]:
        """Return every available mode."""
        return self.platform_manager.get_available_modes()

    def get_current_display_mode(self) -> DisplayMode:
        """Return the active mode."""
        return self.platform_manager.get_current_display_mode()

    def find_exact_match(
        self, spec: DisplaySpec, available_modes: Sequence[DisplayMode]
    ) -> DisplayMode | None:
        """Return the first mode that satisfies every field of ``spec``."""
        for mode in available_modes:
            mode_spec = DisplaySpec(
                width=mode.width, height=mode.height, refresh_rate=mode.refresh_rate
            )
            if spec.matches_exact(mode_spec):
                return mode
        return None