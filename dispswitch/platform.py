"""Access to the system's display modes through a pluggable backend."""

from __future__ import annotations

from typing import Protocol

from .display import DisplayMode, format_rate


class DisplayError(RuntimeError):
    """Raised when display modes cannot be read or applied."""


class DisplayBackend(Protocol):
    """What a display backend must provide."""

    def get_available_modes(self) -> list[DisplayMode]: ...

    def set_display_mode(self, mode: DisplayMode) -> None: ...

    def get_current_display_mode(self) -> DisplayMode: ...


_STUB_MODES = (
    DisplayMode(1920, 1080, 60.0),
    DisplayMode(1920, 1080, 144.0),
    DisplayMode(2560, 1440, 60.0),
    DisplayMode(2560, 1440, 144.0),
    DisplayMode(3840, 2160, 60.0),
)

_STUB_CURRENT = DisplayMode(1920, 1080, 60.0)


class StubDisplayManager:
    """A backend with a fixed mode list that cannot switch modes."""

    def get_available_modes(self) -> list[DisplayMode]:
        """Return a fixed list of plausible modes."""
        return list(_STUB_MODES)

    def set_display_mode(self, mode: DisplayMode) -> None:
        """Report the mode that would be set, then fail."""
        print(
            f"Stub: Would set display mode to "
            f"{mode.width}x{mode.height}@{format_rate(mode.refresh_rate)}Hz"
        )
        raise DisplayError(
            "Display switching not supported on this platform. "
            "This is a stub implementation."
        )

    def get_current_display_mode(self) -> DisplayMode:
        """Return a fixed current mode."""
        return _STUB_CURRENT


class PlatformDisplayManager:
    """Front for the display backend; uses the stub backend unless given another."""

    def __init__(self, backend: DisplayBackend | None = None) -> None:
        self.backend: DisplayBackend = backend if backend is not None else StubDisplayManager()

    def get_available_modes(self) -> list[DisplayMode]:
        """Return every mode the backend offers."""
        return self.backend.get_available_modes()

    def set_display_mode(self, mode: DisplayMode) -> None:
        """Ask the backend to switch to ``mode``."""
        self.backend.set_display_mode(mode)

    def get_current_display_mode(self) -> DisplayMode:
        """Return the mode the backend reports as active."""
        return self.backend.get_current_display_mode()