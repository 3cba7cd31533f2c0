"""Tests for the CapabilityLevel classification order and its marks."""

from __future__ import annotations

from nscaps.core.capabilities import CapabilityLevel

class TestCapabilityLevel:
    """NONE < EFFECTIVE < FULL forms a strict total order."""

    def test_ordering(self) -> None:
        assert CapabilityLevel.NONE < CapabilityLevel.EFFECTIVE < CapabilityLevel.FULL

    def test_exactly_three_levels(self) -> None:
        assert len(CapabilityLevel) == 3

    def test_int_values(self) -> None:
        assert [level.value for level in CapabilityLevel] == [0, 1, 2]

    def test_marks_are_distinct(self) -> None:
        marks = {level.mark for level in CapabilityLevel}
        assert len(marks) == 3

    def test_summaries(self) -> None:
        assert CapabilityLevel.NONE.summary == "(no capabilities)"
        assert "ALL" in CapabilityLevel.FULL.summary
        assert "effective" in CapabilityLevel.EFFECTIVE.summary
