"""Tests for candidate size generation."""

from app.models.tyre import TyreSize
from app.services.candidates import DEFAULT_STEP_POLICY, StepPolicy, generate_candidates
from app.services.tyre_size import format_tyre_size

OEM = TyreSize(width_mm=265, aspect_ratio=30, rim_diameter_in=20)


def _sizes(candidates: list[TyreSize]) -> list[str]:
    return [format_tyre_size(c) for c in candidates]


class TestGenerateCandidates:
    def test_default_policy_order(self):
        assert _sizes(generate_candidates(OEM)) == [
            "245/30 R20",
            "255/30 R20",
            "275/30 R20",
            "285/30 R20",
            "265/25 R20",
            "265/35 R20",
            "255/25 R20",
            "275/25 R20",
        ]

    def test_rim_always_held(self):
        assert all(c.rim_diameter_in == 20 for c in generate_candidates(OEM))

    def test_oem_and_duplicates_removed(self):
        policy = StepPolicy(
            width_offsets_mm=(10, 0, 10),
            aspect_offsets=(0,),
            combined_offsets=((10, 0), (-10, 5)),
        )
        assert _sizes(generate_candidates(OEM, policy)) == ["275/30 R20", "255/35 R20"]

    def test_no_bounds_check_on_derived_sizes(self):
        oem = TyreSize(width_mm=100, aspect_ratio=10, rim_diameter_in=10)
        policy = StepPolicy(width_offsets_mm=(-20,), aspect_offsets=(-5,), combined_offsets=())
        assert _sizes(generate_candidates(oem, policy)) == ["80/10 R10", "100/05 R10"]

    def test_degenerate_sizes_dropped(self):
        oem = TyreSize(width_mm=105, aspect_ratio=10, rim_diameter_in=10)
        policy = StepPolicy(
            width_offsets_mm=(-200, -105),
            aspect_offsets=(-10, -15),
            combined_offsets=(),
        )
        assert generate_candidates(oem, policy) == []

    def test_default_policy_is_shared_constant(self):
        assert DEFAULT_STEP_POLICY == StepPolicy()
