# dispswitch

A command-line tool and small library that lists display modes and picks
the mode that best matches a short, human-friendly specification such as
`1440p@144hz` or `16:9`. It also keeps named profiles of specifications.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Specifications

A specification describes a resolution or an aspect ratio. A refresh rate
may follow after `@`:

| Form        | Examples                      | Meaning                          |
|-------------|-------------------------------|----------------------------------|
| `WxH`       | `1920x1080`, `2560x1440`      | exact resolution                 |
| `Np`        | `720p`, `1080p`, `1440p`      | height, with a common width      |
| `Ni` / `N`  | `1080i`, `1080`               | same as `Np`                     |
| `Nk`        | `2k`, `4k`, `8k`              | 2048x1080, 3840x2160, 7680x4320  |
| `W:H`       | `16:9`, `21:9`                | any resolution of that ratio     |
| `@Rhz`      | `@60hz`, `@143.9hz`           | refresh rate                     |
| `@Rfps`     | `@59.94fps`                   | refresh rate                     |

Heights 480, 576, 720, 1080, 1440, 2160 and 4320 map to the widths 640, 768,
1280, 1920, 2560, 3840 and 7680; any other height gets a 16:9 width.
Specifications are case-insensitive (`4K@60Hz` works) and surrounding
whitespace is ignored. Anything else is rejected with an error.

### How a mode is chosen

Without `--exact`:

- For a resolution: if modes with exactly that resolution exist, the refresh
  rate decides among them; otherwise the mode with the nearest resolution is
  taken.
- For an aspect ratio: among modes whose reduced ratio equals it, the refresh
  rate decides.
- Refresh rate: a rate within 0.1 of the requested one wins; otherwise the
  lowest higher rate; otherwise the highest lower rate. With no rate given,
  the highest rate available wins.

With `--exact`, the first available mode that satisfies every part of the
specification (rates within 0.1) is taken, or none at all.

## Usage

Switch, trying each specification in turn until one applies:

```
dispswitch -s 4k@60hz -s 1440p@144hz -s 1080p
dispswitch -s 1920x1080@60hz --exact
```

List available modes, optionally filtered by the first `-s`, as text or JSON:

```
dispswitch --list
dispswitch --list -s 16:9 --json
```

Show the current mode:

```
dispswitch --current
dispswitch --current --json
```

Show the version:

```
dispswitch --version
```

Errors are printed to standard error and the command exits with status 1.

## Profiles

Save an ordered list of specifications under a name, apply it later, or list
what is stored:

```
dispswitch --create-profile gaming -s 1440p@144hz -s 1080p@144hz
dispswitch --profile gaming
dispswitch --list-profiles
```

A profile needs at least one specification; creating one with an existing
name replaces it. Profiles are stored as JSON in `profiles.json` inside the
user's configuration directory under `display-switch`. If that file cannot be
read as profiles, a warning is printed and the tool starts with no profiles.

## Using it as a library

- `dispswitch.parser.parse_display_spec` turns text into a
  `dispswitch.display.DisplaySpec`; it raises `SpecParseError` on bad input.
- `DisplaySpec.to_concrete_spec(modes)` picks the best `DisplayMode` from a
  list, and `DisplayMode.matches_filter(spec)` filters modes.
- `dispswitch.manager.DisplayManager` chooses and applies modes through a
  `dispswitch.platform.PlatformDisplayManager`, which accepts any backend
  object providing `get_available_modes()`, `set_display_mode(mode)` and
  `get_current_display_mode()`.
- `dispswitch.profile.ProfileManager(config_file=None)` manages profiles in
  a given file or the default one.

## What it does not do

The package has no backend that talks to a real display. By default it uses
`StubDisplayManager`, which reports a fixed set of modes (1920x1080 and
2560x1440 at 60 and 144 Hz, 3840x2160 at 60 Hz) and a current mode of
1920x1080@60hz. Listing, filtering and matching work against that set, but
every switch fails with an error and the display is never changed. A real
backend can be passed to `PlatformDisplayManager` from your own code.