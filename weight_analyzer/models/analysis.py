"""
Analysis, prediction and category summary models.

``Analysis`` is the per-disease aggregate the dashboard renders: a
``FeatureSet`` plus the two headline features (largest and smallest raw
global weight). ``Prediction`` is the predictor's result for one input
record. ``CategorySummary`` rolls up every analysis in one category.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from weight_analyzer.models.feature import Feature, FeatureSet
from weight_analyzer.taxonomy.weight_taxonomy import Category, Outcome


class Analysis(BaseModel):
    """Global-vs-local weight comparison for one disease.

    Attributes:
        analysis_id: URL-safe slug of ``name``, e.g. ``"cystic-fibrosis"``.
        name: Display name of the disease.
        category: Disease family.
        feature_set: Normalizer output for this disease.
        top_positive: Feature with the largest raw global weight.
        top_negative: Feature with the smallest raw global weight.
    """

    model_config = ConfigDict(frozen=True)

    analysis_id: str
    name: str
    category: Category
    feature_set: FeatureSet
    top_positive: Feature
    top_negative: Feature

    @field_validator("analysis_id")
    @classmethod
    def validate_id_format(cls, v: str) -> str:
        if not v or " " in v or v != v.lower():
            raise ValueError(
                f"analysis_id '{v}' must be lowercase with no spaces."
            )
        return v

    @property
    def bias_flag(self) -> bool:
        return self.feature_set.bias_flag


class Prediction(BaseModel):
    """Predictor output for one input record.

    Attributes:
        score: Raw weighted sum of inputs times global weights.
        normalized_score: ``score`` divided by the total absolute global weight.
        confidence: Deterministic confidence in ``[0, 1]``.
        outcome: Decision label.
    """

    model_config = ConfigDict(frozen=True)

    score: float
    normalized_score: float
    confidence: float
    outcome: Outcome

    @field_validator("confidence")
    @classmethod
    def validate_confidence_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"confidence must be in [0.0, 1.0], got {v}.")
        return v


class CategorySummary(BaseModel):
    """Roll-up of all analyses in one category."""

    model_config = ConfigDict(frozen=True)

    category: Category
    total_analyses: int
    biased_count: int
    bias_percentage: float
    top_catalyst: Optional[str] = None
