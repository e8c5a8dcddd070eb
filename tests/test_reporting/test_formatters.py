"""Tests for weight_analyzer.reporting.formatters."""

from __future__ import annotations

from weight_analyzer.analysis.builder import build_analysis
from weight_analyzer.engine.predictor import predict
from weight_analyzer.engine.selector import sign_flip_corrections
from weight_analyzer.models.analysis import CategorySummary
from weight_analyzer.reporting.formatters import (
    format_analysis_table,
    format_category_summary,
    format_prediction,
)
from weight_analyzer.taxonomy.weight_taxonomy import Category


def _analysis(sample_parameters, sample_global_weights, sample_local_weights):
    return build_analysis(
        "Cystic Fibrosis", Category.GENETIC,
        sample_parameters, sample_global_weights, sample_local_weights,
    )


class TestFormatAnalysisTable:
    def test_header_and_rows(
        self, sample_parameters, sample_global_weights, sample_local_weights
    ):
        a = _analysis(sample_parameters, sample_global_weights, sample_local_weights)
        out = format_analysis_table(a)
        assert "Cystic Fibrosis (genetic)" in out
        assert "[BIAS FLAG]" in out
        assert "Top positive: gene_marker_A (+2.000)" in out
        assert "Top negative: bmi (-0.800)" in out
        for p in sample_parameters:
            assert p in out

    def test_stable_label(self):
        a = build_analysis("ADHD", Category.MENTAL, ["age"], {"age": 1.0}, {})
        assert "[STABLE]" in format_analysis_table(a)

    def test_corrections_listed(
        self, sample_parameters, sample_global_weights, sample_local_weights
    ):
        a = _analysis(sample_parameters, sample_global_weights, sample_local_weights)
        flips = sign_flip_corrections(a.feature_set.features)
        out = format_analysis_table(a, flips)
        assert "Sign flips requiring audit (1)" in out
        assert "age: global +0.400 vs local -0.200" in out

    def test_no_corrections_section_when_empty(
        self, sample_parameters, sample_global_weights, sample_local_weights
    ):
        a = _analysis(sample_parameters, sample_global_weights, sample_local_weights)
        assert "Sign flips" not in format_analysis_table(a)


class TestFormatCategorySummary:
    def test_values(self):
        s = CategorySummary(
            category=Category.GENETIC, total_analyses=10, biased_count=3,
            bias_percentage=30.0, top_catalyst="gene_marker_B",
        )
        out = format_category_summary(s)
        assert "genetic" in out
        assert "3 (30.0%)" in out
        assert "gene_marker_B" in out

    def test_missing_catalyst(self):
        s = CategorySummary(
            category=Category.MENTAL, total_analyses=0, biased_count=0,
            bias_percentage=0.0,
        )
        assert "N/A" in format_category_summary(s)


class TestFormatPrediction:
    def test_positive(self, sample_feature_set):
        out = format_prediction(predict(sample_feature_set, {"gene_marker_A": 2.0}))
        assert "Positive Outcome" in out
        assert "HIGH" in out

    def test_negative_low_confidence(self, sample_feature_set):
        out = format_prediction(predict(sample_feature_set, {}))
        assert "Negative Outcome" in out
        assert "50.0% (LOW)" in out
