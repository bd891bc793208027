import pytest

from dispswitch.display import DisplaySpec
from dispswitch.parser import (
    SpecParseError,
    calculate_width_from_height,
    parse_aspect_ratio,
    parse_display_spec,
    parse_refresh_rate,
    parse_resolution,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1920x1080", (1920, 1080)),
        ("2560x1440", (2560, 1440)),
        ("1080p", (1920, 1080)),
        ("4k", (3840, 2160)),
        ("1080i", (1920, 1080)),
        ("2k", (2048, 1080)),
        ("8k", (7680, 4320)),
        ("720", (1280, 720)),
    ],
)
def test_parse_resolution(text, expected):
    assert parse_resolution(text) == expected


def test_parse_resolution_rejects_unknown_k():
    with pytest.raises(SpecParseError, match="Unsupported K resolution: 5k"):
        parse_resolution("5k")


def test_parse_resolution_rejects_garbage():
    with pytest.raises(SpecParseError):
        parse_resolution("wide")


@pytest.mark.parametrize(
    "text, expected",
    [("16:9", (16, 9)), ("4:3", (4, 3)), ("21:9", (21, 9))],
)
def test_parse_aspect_ratio(text, expected):
    assert parse_aspect_ratio(text) == expected


def test_parse_aspect_ratio_rejects():
    with pytest.raises(SpecParseError):
        parse_aspect_ratio("16/9")


@pytest.mark.parametrize(
    "text, expected",
    [("60hz", 60.0), ("144hz", 144.0), ("59.94fps", 59.94), ("120fps", 120.0)],
)
def test_parse_refresh_rate(text, expected):
    assert parse_refresh_rate(text) == expected


def test_parse_refresh_rate_rejects():
    with pytest.raises(SpecParseError):
        parse_refresh_rate("60")


def test_parse_display_spec():
    spec = parse_display_spec("1920x1080@60hz")
    assert (spec.width, spec.height, spec.refresh_rate) == (1920, 1080, 60.0)

    spec = parse_display_spec("16:9@120fps")
    assert spec.aspect_ratio == (16, 9)
    assert spec.refresh_rate == 120.0

    spec = parse_display_spec("4k")
    assert (spec.width, spec.height) == (3840, 2160)
    assert spec.refresh_rate is None


def test_parse_display_spec_normalises_case_and_space():
    assert parse_display_spec("  1080P@60HZ ") == DisplaySpec(
        width=1920, height=1080, refresh_rate=60.0
    )


def test_parse_display_spec_rejects():
    with pytest.raises(SpecParseError, match="Unable to parse display specification: abc"):
        parse_display_spec("ABC")


def test_parse_display_spec_bad_rate():
    with pytest.raises(SpecParseError):
        parse_display_spec("1080p@fast")


def test_calculate_width_from_height():
    assert calculate_width_from_height(576) == 768
    assert calculate_width_from_height(480) == 640
    assert calculate_width_from_height(900) == 1600