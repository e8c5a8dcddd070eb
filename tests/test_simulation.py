"""Tests for weight_analyzer/simulation.py."""

from __future__ import annotations

import pytest

from weight_analyzer.simulation import SimulatedWeightSource

PARAMS = ["age", "bmi", "gene_marker_A", "stress_level"]


def test_covers_every_parameter():
    glob, loc = SimulatedWeightSource(seed=1).draw(PARAMS)
    assert list(glob) == PARAMS
    assert list(loc) == PARAMS


def test_values_within_bounds():
    source = SimulatedWeightSource(seed=3, low=-2.0, high=0.5)
    for _ in range(20):
        glob, loc = source.draw(PARAMS)
        for v in [*glob.values(), *loc.values()]:
            assert -2.0 <= v < 0.5


def test_same_seed_same_draws():
    a = SimulatedWeightSource(seed=42)
    b = SimulatedWeightSource(seed=42)
    assert a.draw(PARAMS) == b.draw(PARAMS)
    assert a.draw(PARAMS) == b.draw(PARAMS)


def test_successive_draws_differ():
    source = SimulatedWeightSource(seed=42)
    assert source.draw(PARAMS) != source.draw(PARAMS)


def test_global_and_local_independent():
    glob, loc = SimulatedWeightSource(seed=5).draw(PARAMS)
    assert glob != loc


def test_invalid_bounds():
    with pytest.raises(ValueError, match="low"):
        SimulatedWeightSource(low=1.0, high=-1.0)
