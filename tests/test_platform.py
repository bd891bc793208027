import pytest

from dispswitch.display import DisplayMode
from dispswitch.platform import DisplayError, PlatformDisplayManager, StubDisplayManager


class RecordingBackend:
    def __init__(self, modes, current):
        self.modes = modes
        self.current = current
        self.applied = []

    def get_available_modes(self):
        return list(self.modes)

    def set_display_mode(self, mode):
        self.applied.append(mode)

    def get_current_display_mode(self):
        return self.current


def test_stub_available_modes():
    modes = StubDisplayManager().get_available_modes()
    assert len(modes) == 5
    assert modes[0] == DisplayMode(1920, 1080, 60.0)
    assert DisplayMode(3840, 2160, 60.0) in modes


def test_stub_modes_are_unique():
    modes = StubDisplayManager().get_available_modes()
    assert len(set(modes)) == len(modes)


def test_stub_current_mode():
    assert StubDisplayManager().get_current_display_mode() == DisplayMode(1920, 1080, 60.0)


def test_stub_set_mode_fails_and_reports(capsys):
    with pytest.raises(DisplayError, match="not supported"):
        StubDisplayManager().set_display_mode(DisplayMode(2560, 1440, 144.0))
    out = capsys.readouterr().out
    assert "Stub: Would set display mode to 2560x1440@144Hz" in out


def test_platform_manager_defaults_to_stub():
    manager = PlatformDisplayManager()
    assert manager.get_available_modes() == StubDisplayManager().get_available_modes()
    with pytest.raises(DisplayError):
        manager.set_display_mode(DisplayMode(1920, 1080, 60.0))


def test_platform_manager_delegates_to_backend():
    modes = [DisplayMode(1280, 720, 60.0), DisplayMode(1920, 1080, 75.0)]
    backend = RecordingBackend(modes, modes[1])
    manager = PlatformDisplayManager(backend)
    assert manager.get_available_modes() == modes
    assert manager.get_current_display_mode() == modes[1]
    manager.set_display_mode(modes[0])
    assert backend.applied == [modes[0]]