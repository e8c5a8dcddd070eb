"""
Normalizer: merges a parameter list with two sparse weight maps into a
``FeatureSet``.

Algorithm
---------
    1. weight_global = global_weights.get(p, 0.0)   (absent → 0, not an error)
       weight_local  = local_weights.get(p, 0.0)
    2. max_abs = max(|weight_global|, |weight_local|) over every parameter
       and both sources, one constant for the whole set.
    3. max_abs == 0 → 1.0 (all scaled weights become 0, direction NEUTRAL).
    4. global_scaled = weight_global / max_abs
       local_scaled  = weight_local  / max_abs
       direction     = sign class of global_scaled.
    5. bias_flag = any feature whose parameter contains the sensitive marker
       has |global_scaled| > bias_threshold (strict).

Steps 1 and 2 must finish before step 4 starts: the divisor is not known until
every weight has been seen.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping, Sequence

from weight_analyzer.models.feature import Feature, FeatureSet
from weight_analyzer.taxonomy.weight_taxonomy import direction_for

logger = logging.getLogger(__name__)

DEFAULT_SENSITIVE_MARKER = "gene_marker"
DEFAULT_BIAS_THRESHOLD = 0.85


def normalize(
    parameters:       Sequence[str],
    global_weights:   Mapping[str, float],
    local_weights:    Mapping[str, float],
    *,
    sensitive_marker: str = DEFAULT_SENSITIVE_MARKER,
    bias_threshold:   float = DEFAULT_BIAS_THRESHOLD,
) -> FeatureSet:
    """Build a max-absolute scaled ``FeatureSet``.

    Parameters should be unique. Duplicates are not rejected: every
    occurrence produces its own feature from the same map lookup, and a
    warning is logged.

    Args:
        parameters:       Ordered parameter identifiers.
        global_weights:   Sparse parameter → global weight map.
        local_weights:    Sparse parameter → local weight map.
        sensitive_marker: Substring identifying fairness-sensitive parameters.
        bias_threshold:   Scaled global magnitude above which a sensitive
                          parameter raises the bias flag.

    Returns:
        A new ``FeatureSet`` with one feature per parameter, in input order.
    """
    duplicates = [p for p, n in Counter(parameters).items() if n > 1]
    if duplicates:
        logger.warning(
            "normalize: duplicate parameters %s; each occurrence is kept",
            sorted(duplicates),
        )

    # Pass 1: resolve raw weights and the shared constant.
    raw: list[tuple[str, float, float]] = [
        (p, float(global_weights.get(p, 0.0)), float(local_weights.get(p, 0.0)))
        for p in parameters
    ]
    max_abs = max(
        (max(abs(wg), abs(wl)) for _, wg, wl in raw),
        default=0.0,
    )
    if max_abs == 0.0:
        max_abs = 1.0

    # Pass 2: scale.
    features: list[Feature] = []
    for parameter, weight_global, weight_local in raw:
        global_scaled = weight_global / max_abs
        features.append(
            Feature(
                parameter=parameter,
                global_weight=weight_global,
                local_weight=weight_local,
                global_scaled=global_scaled,
                local_scaled=weight_local / max_abs,
                direction=direction_for(global_scaled),
            )
        )

    bias_flag = any(
        sensitive_marker in f.parameter and abs(f.global_scaled) > bias_threshold
        for f in features
    )

    logger.debug(
        "normalize: %d features | max_abs=%.6g | bias_flag=%s",
        len(features), max_abs, bias_flag,
    )

    return FeatureSet(
        bias_flag=bias_flag,
        max_abs=max_abs,
        features=tuple(features),
    )
