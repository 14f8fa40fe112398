"""Tests for tyre geometry."""

import pytest

from app.models.tyre import TyreSize
from app.utils.tyre_math import overall_diameter_mm, pct_diff, sidewall_height_mm


class TestGeometry:
    def test_sidewall(self):
        tyre = TyreSize(width_mm=265, aspect_ratio=30, rim_diameter_in=20)
        assert sidewall_height_mm(tyre) == pytest.approx(79.5)

    def test_overall_diameter(self):
        tyre = TyreSize(width_mm=265, aspect_ratio=30, rim_diameter_in=20)
        # 20 × 25.4 + 2 × 79.5
        assert overall_diameter_mm(tyre) == pytest.approx(667.0)

    def test_overall_diameter_205_55_16(self):
        tyre = TyreSize(width_mm=205, aspect_ratio=55, rim_diameter_in=16)
        assert overall_diameter_mm(tyre) == pytest.approx(631.9)


class TestPctDiff:
    def test_symmetric_magnitude(self):
        assert pct_diff(100, 97) == pytest.approx(3.0)
        assert pct_diff(100, 103) == pytest.approx(3.0)

    def test_identical(self):
        assert pct_diff(667.0, 667.0) == 0

    def test_zero_base_rejected(self):
        with pytest.raises(ValueError):
            pct_diff(0, 10)
