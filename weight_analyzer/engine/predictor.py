"""
Predictor: scores a sparse input record against a ``FeatureSet``.

Score formula
-------------
    score            = Σ input.get(f.parameter, 0) * f.global_weight
    total            = Σ |f.global_weight|
    normalized_score = score / (total or 1)
    outcome          = POSITIVE_OUTCOME if normalized_score > threshold
                       else NEGATIVE_OUTCOME          (threshold default 0.1)

Confidence
----------
    confidence = min(1.0, 0.5 + |normalized_score| / 2)

0.5 means "no evidence either way" (zero score); the value rises linearly
with the magnitude of the normalized score and saturates at 1.0 once
|normalized_score| >= 1, i.e. once the inputs align with every weight at
unit strength.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from weight_analyzer.models.analysis import Prediction
from weight_analyzer.models.feature import FeatureSet
from weight_analyzer.taxonomy.weight_taxonomy import Outcome

logger = logging.getLogger(__name__)

DEFAULT_DECISION_THRESHOLD = 0.1


def predict(
    feature_set:        FeatureSet,
    input:              Mapping[str, float],
    *,
    decision_threshold: float = DEFAULT_DECISION_THRESHOLD,
) -> Prediction:
    """Score ``input`` against the global weights of ``feature_set``.

    Args:
        feature_set:        Normalizer output for one analysis.
        input:              Sparse parameter → value record; absent
                            parameters contribute nothing.
        decision_threshold: Exclusive lower bound on the normalized score
                            for a positive outcome.

    Returns:
        ``Prediction`` with score, normalized score, confidence and outcome.
    """
    score = 0.0
    total = 0.0
    for feature in feature_set.features:
        score += float(input.get(feature.parameter, 0.0)) * feature.global_weight
        total += abs(feature.global_weight)

    normalized_score = score / (total if total != 0.0 else 1.0)
    outcome = (
        Outcome.POSITIVE_OUTCOME
        if normalized_score > decision_threshold
        else Outcome.NEGATIVE_OUTCOME
    )

    logger.debug(
        "predict: score=%.6g total=%.6g normalized=%.6g -> %s",
        score, total, normalized_score, outcome,
    )

    return Prediction(
        score=score,
        normalized_score=normalized_score,
        confidence=confidence_from_score(normalized_score),
        outcome=outcome,
    )


def confidence_from_score(normalized_score: float) -> float:
    """Map a normalized score to a confidence in ``[0.5, 1.0]``."""
    return min(1.0, 0.5 + abs(normalized_score) / 2.0)
