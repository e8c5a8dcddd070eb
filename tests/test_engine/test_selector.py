"""
Tests for weight_analyzer/engine/selector.py.

What we test
------------
top_positive() / top_negative():
  - Select by RAW global_weight, not by scaled value or local weight.
  - First occurrence wins ties.
  - Empty input raises EmptyInputError (a ValueError).

sign_flip_corrections():
  - Reports global/local sign disagreements above the magnitude floor.
"""

from __future__ import annotations

import pytest

from weight_analyzer.engine.normalizer import normalize
from weight_analyzer.engine.selector import (
    EmptyInputError,
    select_top_features,
    sign_flip_corrections,
    top_negative,
    top_positive,
)


class TestTopFeatures:
    def test_top_positive(self, sample_feature_set):
        assert top_positive(sample_feature_set.features).parameter == "gene_marker_A"

    def test_top_negative(self, sample_feature_set):
        assert top_negative(sample_feature_set.features).parameter == "bmi"

    def test_select_top_features_pair(self, sample_feature_set):
        pos, neg = select_top_features(sample_feature_set.features)
        assert (pos.parameter, neg.parameter) == ("gene_marker_A", "bmi")

    def test_tie_goes_to_first_occurrence(self):
        fs = normalize(["a", "b"], {"a": 5, "b": 5}, {})
        assert top_positive(fs.features).parameter == "a"
        assert top_negative(fs.features).parameter == "a"

    def test_negative_tie_goes_to_first_occurrence(self):
        fs = normalize(["a", "b", "c"], {"a": 1, "b": -3, "c": -3}, {})
        assert top_negative(fs.features).parameter == "b"

    def test_uses_global_not_local_weight(self):
        fs = normalize(["a", "b"], {"a": 1.0, "b": 0.5}, {"b": 50.0})
        assert top_positive(fs.features).parameter == "a"

    def test_all_negative_weights(self):
        fs = normalize(["a", "b"], {"a": -2.0, "b": -1.0}, {})
        assert top_positive(fs.features).parameter == "b"
        assert top_negative(fs.features).parameter == "a"

    def test_single_feature_is_both(self):
        fs = normalize(["only"], {"only": 0.3}, {})
        pos, neg = select_top_features(fs.features)
        assert pos is neg

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            top_positive(())
        with pytest.raises(EmptyInputError):
            top_negative([])

    def test_empty_input_error_is_value_error(self):
        with pytest.raises(ValueError, match="At least one feature"):
            select_top_features(())


class TestSignFlipCorrections:
    def test_detects_flip(self, sample_feature_set):
        flips = sign_flip_corrections(sample_feature_set.features)
        assert [f.parameter for f in flips] == ["age"]

    def test_ignores_small_global_weight(self):
        fs = normalize(["a"], {"a": 0.05}, {"a": -1.0})
        assert sign_flip_corrections(fs.features) == []

    def test_zero_local_counts_as_disagreement(self):
        fs = normalize(["a"], {"a": 0.5}, {})
        assert [f.parameter for f in sign_flip_corrections(fs.features)] == ["a"]

    def test_custom_floor(self):
        fs = normalize(["a", "b"], {"a": 0.3, "b": -0.9}, {"a": -0.3, "b": 0.9})
        flips = sign_flip_corrections(fs.features, min_global_weight=0.5)
        assert [f.parameter for f in flips] == ["b"]
