"""
Top-feature selection over a feature sequence.

Selection uses the RAW ``global_weight``, not ``global_scaled``. Ties go to
the first feature in parameter order.
"""

from __future__ import annotations

from collections.abc import Sequence

from weight_analyzer.models.feature import Feature


class EmptyInputError(ValueError):
    """A top feature was requested from an empty feature sequence."""


def _require_features(features: Sequence[Feature]) -> None:
    if not features:
        raise EmptyInputError(
            "At least one feature is required to select a top feature."
        )


def top_positive(features: Sequence[Feature]) -> Feature:
    """Return the feature with the largest raw global weight.

    Raises:
        EmptyInputError: If ``features`` is empty.
    """
    _require_features(features)
    best = features[0]
    for feature in features[1:]:
        if feature.global_weight > best.global_weight:
            best = feature
    return best


def top_negative(features: Sequence[Feature]) -> Feature:
    """Return the feature with the smallest raw global weight.

    Raises:
        EmptyInputError: If ``features`` is empty.
    """
    _require_features(features)
    best = features[0]
    for feature in features[1:]:
        if feature.global_weight < best.global_weight:
            best = feature
    return best


def select_top_features(features: Sequence[Feature]) -> tuple[Feature, Feature]:
    """Return ``(top_positive, top_negative)``."""
    return top_positive(features), top_negative(features)


def sign_flip_corrections(
    features:          Sequence[Feature],
    min_global_weight: float = 0.1,
) -> list[Feature]:
    """Features where the local model disagrees in sign with the global one.

    Only features with ``|global_weight| > min_global_weight`` are reported.
    A local weight of exactly zero has sign 0 and therefore disagrees with
    any qualifying global weight.

    Args:
        features:          Features to inspect, in display order.
        min_global_weight: Raw global magnitude a flip must exceed.

    Returns:
        Matching features, input order preserved.
    """
    return [
        f for f in features
        if _sign(f.global_weight) != _sign(f.local_weight)
        and abs(f.global_weight) > min_global_weight
    ]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)
