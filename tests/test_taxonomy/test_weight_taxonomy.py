"""Tests for weight taxonomy enums and direction_for()."""

from __future__ import annotations

import pytest

from weight_analyzer.taxonomy.weight_taxonomy import (
    Category,
    Direction,
    Outcome,
    direction_for,
)


class TestCategoryEnum:
    def test_required_categories(self):
        assert {c.value for c in Category} == {"genetic", "sexual", "mental"}

    def test_slug_format(self):
        for member in Category:
            assert member.value == member.value.lower()
            assert " " not in member.value


class TestDirectionEnum:
    def test_values(self):
        assert [d.value for d in Direction] == ["POSITIVE", "NEGATIVE", "NEUTRAL"]

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.3, Direction.POSITIVE),
            (1e-300, Direction.POSITIVE),
            (-0.3, Direction.NEGATIVE),
            (0.0, Direction.NEUTRAL),
            (-0.0, Direction.NEUTRAL),
        ],
    )
    def test_direction_for(self, value, expected):
        assert direction_for(value) == expected


class TestOutcomeEnum:
    def test_labels(self):
        assert Outcome.POSITIVE_OUTCOME == "Positive Outcome"
        assert Outcome.NEGATIVE_OUTCOME == "Negative Outcome"
