"""
Taxonomy for weight analysis results.

Three enums describe every result the engine produces:
  - ``Category``:  which disease family an analysis belongs to.
  - ``Direction``: sign classification of a feature's normalized global weight.
  - ``Outcome``:   binary label emitted by the predictor.

Usage example::

    from weight_analyzer.taxonomy.weight_taxonomy import Category, Direction

    category  = Category.GENETIC
    direction = Direction.POSITIVE

This module has NO imports from any other ``weight_analyzer`` package.
"""

from enum import StrEnum


class Category(StrEnum):
    """Disease family used to group analyses and pick a parameter list."""

    GENETIC = "genetic"
    """Inherited conditions; parameter list includes gene marker weights."""

    SEXUAL = "sexual"
    """Sexual and reproductive health conditions."""

    MENTAL = "mental"
    """Psychiatric and behavioral conditions."""


class Direction(StrEnum):
    """Sign of a feature's scaled global weight."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"
    """Scaled global weight is exactly zero."""


class Outcome(StrEnum):
    """Predictor decision label."""

    POSITIVE_OUTCOME = "Positive Outcome"
    NEGATIVE_OUTCOME = "Negative Outcome"


def direction_for(value: float) -> Direction:
    """Classify ``value`` by sign; exact zero is ``NEUTRAL``."""
    if value > 0:
        return Direction.POSITIVE
    if value < 0:
        return Direction.NEGATIVE
    return Direction.NEUTRAL
