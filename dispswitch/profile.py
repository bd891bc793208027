"""Named lists of display specifications stored as JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterable

from platformdirs import user_config_path

from .display import DisplaySpec

APP_NAME = "display-switch"
PROFILES_FILE = "profiles.json"


class ProfileError(LookupError):
    """Raised for missing or invalid profiles."""


def default_config_file() -> Path:
    """Return the path of the profiles file in the user's config directory."""
    return user_config_path(APP_NAME, appauthor=False, roaming=True) / PROFILES_FILE


def _load_profiles(content: str) -> dict[str, list[DisplaySpec]]:
    data = json.loads(content)
    profiles = data["profiles"]
    return {
        str(name): [DisplaySpec.from_dict(item) for item in specs]
        for name, specs in profiles.items()
    }


class ProfileManager:
    """Keeps profiles in memory and writes them to a JSON file on change."""

    def __init__(self, config_file: str | Path | None = None) -> None:
        self.config_file = Path(config_file) if config_file is not None else default_config_file()
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self._profiles: dict[str, list[DisplaySpec]] = {}

        if self.config_file.exists():
            content = self.config_file.read_text(encoding="utf-8")
            try:
                self._profiles = _load_profiles(content)
            except (ValueError, TypeError, KeyError, AttributeError) as exc:
                print(
                    f"Warning: Failed to parse profiles file: {exc}. "
                    "Starting with empty profiles.",
                    file=sys.stderr,
                )
                self._profiles = {}

    def create_profile(self, name: str, specs: Iterable[DisplaySpec]) -> None:
        """Store ``specs`` under ``name``, replacing any existing profile."""
        specs = list(specs)
        if not specs:
            raise ProfileError("Profile must have at least one display specification")
        self._profiles[name] = specs
        self._save()

    def get_profile(self, name: str) -> list[DisplaySpec]:
        """Return the specs of profile ``name``."""
        try:
            return list(self._profiles[name])
        except KeyError:
            raise ProfileError(f"Profile '{name}' not found") from None

    def delete_profile(self, name: str) -> None:
        """Remove profile ``name``."""
        if self._profiles.pop(name, None) is None:
            raise ProfileError(f"Profile '{name}' not found")
        self._save()

    def list_profiles(self) -> list[tuple[str, list[DisplaySpec]]]:
        """Return all profiles sorted by name."""
        return [(name, list(specs)) for name, specs in sorted(self._profiles.items())]

    def profile_exists(self, name: str) -> bool:
        """Return True if a profile called ``name`` exists."""
        return name in self._profiles

    def _save(self) -> None:
        data = {
            "profiles": {
                name: [spec.to_dict() for spec in specs]
                for name, specs in self._profiles.items()
            }
        }
        self.config_file.write_text(json.dumps(data, indent=2), encoding="utf-8")