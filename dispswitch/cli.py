"""Command line interface: argument parsing and command handlers."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from typing import Sequence, Union

from .display import DisplayMode, DisplaySpec
from .manager import DisplayManager
from .parser import SpecParseError, parse_display_spec
from .platform import DisplayError
from .profile import ProfileError, ProfileManager

PROG = "display-switch"
VERSION = "0.1.0"


@dataclass(frozen=True)
class Switch:
    """Switch to the first applicable spec."""

    specs: list[str] = field(default_factory=list)
    exact: bool = False


@dataclass(frozen=True)
class ListModes:
    """List available modes, optionally filtered by a spec."""

    spec: str | None = None
    json: bool = False


@dataclass(frozen=True)
class CreateProfile:
    """Store a named list of specs."""

    name: str
    specs: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UseProfile:
    """Switch using the specs of a named profile."""

    name: str


@dataclass(frozen=True)
class ListProfiles:
    """Show all stored profiles."""


@dataclass(frozen=True)
class Current:
    """Show the active display mode."""

    json: bool = False


Command = Union[Switch, ListModes, CreateProfile, UseProfile, ListProfiles, Current]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "A cross-platform CLI tool for switching and listing display specifications"
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"{PROG} {VERSION}")
    parser.add_argument(
        "-s",
        "--spec",
        metavar="SPEC",
        action="append",
        default=[],
        help="Display specifications to try (in order of preference)",
    )
    parser.add_argument(
        "-e", "--exact", action="store_true",
        help="Force exact match instead of closest match",
    )
    parser.add_argument(
        "-l", "--list", action="store_true",
        help="List available display specifications",
    )
    parser.add_argument(
        "-j", "--json", action="store_true",
        help="Output in JSON format (used with --list)",
    )
    parser.add_argument("--create-profile", metavar="NAME", help="Create a named profile")
    parser.add_argument("--profile", metavar="NAME", help="Switch to a named profile")
    parser.add_argument(
        "--list-profiles", action="store_true", help="List all available profiles"
    )
    parser.add_argument(
        "--current", action="store_true", help="Display current display specification"
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Command:
    """Parse command line arguments into the command to run."""
    args = _build_parser().parse_args(argv)

    if args.current:
        return Current(json=args.json)
    if args.list_profiles:
        return ListProfiles()
    if args.create_profile is not None:
        return CreateProfile(name=args.create_profile, specs=list(args.spec))
    if args.profile is not None:
        return UseProfile(name=args.profile)
    if args.list:
        return ListModes(spec=args.spec[0] if args.spec else None, json=args.json)
    return Switch(specs=list(args.spec), exact=args.exact)


def _parse_specs(specs: Sequence[str]) -> list[DisplaySpec]:
    return [parse_display_spec(text) for text in specs]


def handle_switch(
    display_manager: DisplayManager, specs: Sequence[str], exact: bool = False
) -> DisplayMode:
    """Try each spec in turn and return the mode that was applied."""
    for spec in _parse_specs(specs):
        try:
            actual = display_manager.switch_display(spec, exact)
        except (DisplayError, OSError) as exc:
            print(f"Failed to switch to {spec}: {exc}", file=sys.stderr)
            continue
        print(
            f"Successfully switched to display specification: {actual} (requested: {spec})"
        )
        return actual

    raise DisplayError("No suitable display specification could be applied")


def handle_list(
    display_manager: DisplayManager, filter_spec: str | None = None, json_output: bool = False
) -> list[DisplayMode]:
    """Print the available modes, filtered by ``filter_spec`` if given."""
    modes = display_manager.list_available_modes()
    if filter_spec is not None:
        wanted = parse_display_spec(filter_spec)
        modes = [mode for mode in modes if mode.matches_filter(wanted)]

    if json_output:
        print(json.dumps([mode.to_dict() for mode in modes], indent=2))
    else:
        for mode in modes:
            print(mode)
    return modes


def handle_create_profile(
    profile_manager: ProfileManager, name: str, specs: Sequence[str]
) -> None:
    """Parse ``specs`` and store them as profile ``name``."""
    parsed = _parse_specs(specs)
    profile_manager.create_profile(name, parsed)
    print(f"Created profile: {name}")


def handle_profile(
    display_manager: DisplayManager, profile_manager: ProfileManager, name: str
) -> DisplayMode:
    """Apply the first workable spec of profile ``name``."""
    for spec in profile_manager.get_profile(name):
        try:
            actual = display_manager.switch_display(spec, False)
        except (DisplayError, OSError) as exc:
            print(f"Failed to switch to {spec}: {exc}", file=sys.stderr)
            continue
        print(
            f"Successfully switched to profile '{name}' with specification: "
            f"{actual} (requested: {spec})"
        )
        return actual

    raise DisplayError(
        f"No suitable display specification in profile '{name}' could be applied"
    )


def handle_list_profiles(profile_manager: ProfileManager) -> None:
    """Print every stored profile with its specs."""
    profiles = profile_manager.list_profiles()
    if not profiles:
        print("No profiles found.")
        return

    for name, specs in profiles:
        print(f"Profile: {name}")
        for spec in specs:
            print(f"  - {spec}")
        print()


def handle_current(display_manager: DisplayManager, json_output: bool = False) -> DisplayMode:
    """Print the active display mode and return it."""
    mode = display_manager.get_current_display_mode()
    if json_output:
        print(json.dumps(mode.to_dict(), indent=2))
    else:
        print(f"Current display specification: {mode}")
    return mode


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    command = parse_args(argv)
    try:
        display_manager = DisplayManager()
        match command:
            case Switch(specs=specs, exact=exact):
                handle_switch(display_manager, specs, exact)
            case ListModes(spec=spec, json=as_json):
                handle_list(display_manager, spec, as_json)
            case CreateProfile(name=name, specs=specs):
                handle_create_profile(ProfileManager(), name, specs)
            case UseProfile(name=name):
                handle_profile(display_manager, ProfileManager(), name)
            case ListProfiles():
                handle_list_profiles(ProfileManager())
            case Current(json=as_json):
                handle_current(display_manager, as_json)
    except (SpecParseError, DisplayError, ProfileError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0