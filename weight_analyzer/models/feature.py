"""
Feature and feature-set models produced by the normalizer.

``Feature`` is one parameter's global/local weight pair together with the
max-absolute scaled values and the direction label derived from the scaled
global weight.

``FeatureSet`` is the full normalizer output for one ``(parameters,
global_weights, local_weights)`` triple. Every feature in a set was divided
by the same ``max_abs`` constant, which is recorded on the set so results
can be reproduced.

Both models are frozen: a normalization run always returns a new value and
nothing downstream mutates it. They validate from either snake_case or
camelCase keys (``globalWeight``, ``biasFlag``) and always dump snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from weight_analyzer.taxonomy.weight_taxonomy import Direction, direction_for

NORMALIZATION_METHOD = "max-absolute scaling"
STATUS_OK = "OK"


class Feature(BaseModel):
    """One parameter's raw and scaled weights.

    Attributes:
        parameter: Parameter identifier, e.g. ``"gene_marker_A"``.
        global_weight: Raw weight from the shared reference model.
        local_weight: Raw weight from the site-specific model.
        global_scaled: ``global_weight / max_abs``, in ``[-1, 1]``.
        local_scaled: ``local_weight / max_abs``, in ``[-1, 1]``.
        direction: Sign class of ``global_scaled``.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    parameter: str
    global_weight: float
    local_weight: float
    global_scaled: float
    local_scaled: float
    direction: Direction

    @field_validator("global_scaled", "local_scaled")
    @classmethod
    def validate_scaled_range(cls, v: float) -> float:
        if not -1.0 <= v <= 1.0:
            raise ValueError(f"Scaled weight must be in [-1.0, 1.0], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_direction_matches_sign(self) -> "Feature":
        expected = direction_for(self.global_scaled)
        if self.direction != expected:
            raise ValueError(
                f"direction {self.direction} does not match sign of "
                f"global_scaled ({self.global_scaled}); expected {expected}."
            )
        return self


class FeatureSet(BaseModel):
    """Normalizer output: scaled features plus the bias flag.

    Attributes:
        status: ``"OK"`` for every successfully built set.
        normalization_method: Fixed descriptive tag for the scaling scheme.
        bias_flag: ``True`` if a sensitive parameter's scaled global weight
            exceeded the bias threshold.
        max_abs: Normalization constant shared by every feature (``1.0`` when
            all input weights were zero).
        features: One entry per input parameter, in input order.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    status: str = STATUS_OK
    normalization_method: str = NORMALIZATION_METHOD
    bias_flag: bool = False
    max_abs: float = 1.0
    features: tuple[Feature, ...] = ()

    @field_validator("max_abs")
    @classmethod
    def validate_max_abs_positive(cls, v: float) -> float:
        if v <= 0.0:
            raise ValueError(f"max_abs must be positive, got {v}.")
        return v

    @property
    def parameters(self) -> list[str]:
        """Parameter names in feature order."""
        return [f.parameter for f in self.features]

    def get(self, parameter: str) -> Feature | None:
        """Return the first feature for ``parameter``, or ``None``."""
        for feature in self.features:
            if feature.parameter == parameter:
                return feature
        return None
