"""
Analysis builder: one ``Analysis`` per disease in a category.

Usage flow
----------
1. analyze_category(spec, source, engine_config)
   -> list[Analysis]  (one per disease, registry order)

2. filter_analyses(analyses, query)
   -> list[Analysis]  (case-insensitive name search)

3. summarize_category(category, analyses)
   -> CategorySummary  (bias count, modal top catalyst)
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Optional

from weight_analyzer.config import EngineConfig
from weight_analyzer.engine.normalizer import normalize
from weight_analyzer.engine.selector import select_top_features
from weight_analyzer.models.analysis import Analysis, CategorySummary
from weight_analyzer.models.category import CategorySpec
from weight_analyzer.simulation import WeightSource
from weight_analyzer.taxonomy.weight_taxonomy import Category

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lower-case ``name`` and replace each whitespace run with ``-``."""
    return _WHITESPACE.sub("-", name.lower())


def build_analysis(
    name:           str,
    category:       Category,
    parameters:     Sequence[str],
    global_weights: Mapping[str, float],
    local_weights:  Mapping[str, float],
    engine_config:  Optional[EngineConfig] = None,
) -> Analysis:
    """Normalize one disease's weights and pick its headline features.

    Raises:
        EmptyInputError: If ``parameters`` is empty.
    """
    cfg = engine_config or EngineConfig()
    feature_set = normalize(
        parameters,
        global_weights,
        local_weights,
        sensitive_marker=cfg.sensitive_marker,
        bias_threshold=cfg.bias_threshold,
    )
    positive, negative = select_top_features(feature_set.features)
    return Analysis(
        analysis_id=slugify(name),
        name=name,
        category=category,
        feature_set=feature_set,
        top_positive=positive,
        top_negative=negative,
    )


def analyze_category(
    spec:          CategorySpec,
    source:        WeightSource,
    engine_config: Optional[EngineConfig] = None,
) -> list[Analysis]:
    """Build an analysis for every disease in ``spec``.

    Each disease gets its own draw from ``source``; analyses are independent
    of one another.
    """
    analyses: list[Analysis] = []
    for disease in spec.diseases:
        global_weights, local_weights = source.draw(spec.parameters)
        analyses.append(
            build_analysis(
                disease,
                spec.category,
                spec.parameters,
                global_weights,
                local_weights,
                engine_config,
            )
        )

    biased_count = sum(a.bias_flag for a in analyses)
    logger.info(
        "Analyzed category %s: %d diseases, %d flagged for bias",
        spec.category, len(analyses), biased_count,
        extra={
            "category": spec.category.value,
            "analyses": len(analyses),
            "biased_count": biased_count,
        },
    )
    return analyses


def filter_analyses(analyses: Sequence[Analysis], query: str) -> list[Analysis]:
    """Analyses whose name contains ``query`` (case-insensitive)."""
    needle = query.lower()
    return [a for a in analyses if needle in a.name.lower()]


def summarize_category(
    category: Category,
    analyses: Sequence[Analysis],
) -> CategorySummary:
    """Roll up bias flags and the most frequent top-positive parameter.

    ``top_catalyst`` ties go to the parameter seen first.
    """
    total = len(analyses)
    biased = sum(1 for a in analyses if a.bias_flag)
    catalysts = Counter(a.top_positive.parameter for a in analyses)
    top = catalysts.most_common(1)

    return CategorySummary(
        category=category,
        total_analyses=total,
        biased_count=biased,
        bias_percentage=round(biased / (total or 1) * 100.0, 1),
        top_catalyst=top[0][0] if top else None,
    )
