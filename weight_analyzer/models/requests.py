"""
Request documents for the normalize and predict boundary.

Both request shapes accept snake_case keys and the camelCase keys used by
browser clients (``globalWeights``, ``localWeights``, ``featureSet``). The
feature set body takes camelCase too; see ``models/feature.py``.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from weight_analyzer.models.feature import FeatureSet


class NormalizeRequest(BaseModel):
    """``{parameters, global_weights, local_weights}``."""

    model_config = ConfigDict(frozen=True)

    parameters: list[str]
    global_weights: dict[str, float] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("global_weights", "globalWeights"),
    )
    local_weights: dict[str, float] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("local_weights", "localWeights"),
    )


class PredictRequest(BaseModel):
    """``{feature_set, input}``."""

    model_config = ConfigDict(frozen=True)

    feature_set: FeatureSet = Field(
        validation_alias=AliasChoices("feature_set", "featureSet"),
    )
    input: dict[str, float] = Field(default_factory=dict)
