"""Tests for tyre size parsing, formatting and slugs."""

import pytest

from app.models.tyre import TyreSize
from app.services.tyre_size import (
    TyreSizeParseError,
    format_tyre_size,
    parse_tyre_size,
    require_tyre_size,
    size_to_slug,
)


def _tyre(width: int, aspect: int, rim: int) -> TyreSize:
    return TyreSize(width_mm=width, aspect_ratio=aspect, rim_diameter_in=rim)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParse:
    def test_spaced_and_unspaced_are_identical(self):
        spaced = parse_tyre_size("265/30 R20")
        unspaced = parse_tyre_size("265/30R20")
        assert spaced == unspaced == _tyre(265, 30, 20)

    @pytest.mark.parametrize(
        "text",
        [
            " 265/30 r20 ",
            "265 / 30 R 20",
            "265/30\tR20",
            "265.0/30 R20",
        ],
    )
    def test_normalisation(self, text):
        assert parse_tyre_size(text) == _tyre(265, 30, 20)

    def test_bounds_inclusive(self):
        assert parse_tyre_size("100/10 R10") == _tyre(100, 10, 10)
        assert parse_tyre_size("999/95 R30") == _tyre(999, 95, 30)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "265/30",  # no R
            "265/30 R20 R",  # two Rs
            "265R20",  # no slash
            "265/30/20 R20",  # two slashes
            "/30 R20",
            "265/ R20",
            "265/30 R",
            "ABC/30 R20",
            "265/30 ZR20",
            "NAN/30 R20",
            "INF/30 R20",
            "1_00/30 R20",
            "٢٦٥/٣٠ R٢٠",  # Arabic-Indic digits
            "２６５/３０ R２０",  # fullwidth digits
            "70/30 R20",  # width not three digits
            "7000/30 R20",
            "-12/30 R20",
            "265.5/30 R20",
            "265/09 R20",
            "265/96 R20",
            "265/30 R9",
            "265/30 R31",
        ],
    )
    def test_rejects_malformed(self, text):
        assert parse_tyre_size(text) is None

    def test_require_raises(self):
        with pytest.raises(TyreSizeParseError) as exc:
            require_tyre_size("not a tyre")
        assert exc.value.text == "not a tyre"
        assert isinstance(exc.value, ValueError)

    def test_require_returns_value(self):
        assert require_tyre_size("205/55R16") == _tyre(205, 55, 16)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormat:
    def test_canonical_form(self):
        assert format_tyre_size(_tyre(265, 30, 20)) == "265/30 R20"

    def test_aspect_zero_padded(self):
        assert format_tyre_size(_tyre(265, 5, 20)) == "265/05 R20"

    @pytest.mark.parametrize(
        "tyre",
        [_tyre(100, 10, 10), _tyre(205, 55, 16), _tyre(265, 30, 20), _tyre(999, 95, 30)],
    )
    def test_round_trip(self, tyre):
        assert parse_tyre_size(format_tyre_size(tyre)) == tyre


class TestSlug:
    def test_slug(self):
        assert size_to_slug("265/30 R20") == "265-30-20"
        assert size_to_slug("205/55r16") == "205-55-16"

    def test_unparseable_has_no_slug(self):
        assert size_to_slug("265/30") is None
