"""
Export helpers for analysis results.

All functions write to disk and return the written ``Path``.
They accept generic ``list[dict]`` data to stay decoupled from
specific report shapes.

CSV and Parquet exports are flat (one row per analysis × feature) so they
load directly in a spreadsheet or dataframe without pre-processing.
``flatten_analyses_for_export()`` is the adapter that produces those rows.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from weight_analyzer.models.analysis import Analysis

_FEATURE_PA_SCHEMA = pa.schema([
    pa.field("analysis_id",   pa.string(),  nullable=False),
    pa.field("name",          pa.string(),  nullable=False),
    pa.field("category",      pa.string(),  nullable=False),
    pa.field("bias_flag",     pa.bool_(),   nullable=False),
    pa.field("max_abs",       pa.float64(), nullable=False),
    pa.field("parameter",     pa.string(),  nullable=False),
    pa.field("global_weight", pa.float64(), nullable=False),
    pa.field("local_weight",  pa.float64(), nullable=False),
    pa.field("global_scaled", pa.float64(), nullable=False),
    pa.field("local_scaled",  pa.float64(), nullable=False),
    pa.field("direction",     pa.string(),  nullable=False),
    pa.field("is_top_positive", pa.bool_(), nullable=False),
    pa.field("is_top_negative", pa.bool_(), nullable=False),
])

FEATURE_EXPORT_COLUMNS: list[str] = _FEATURE_PA_SCHEMA.names


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path


def export_to_parquet(
    records: list[dict],
    path: Path,
) -> Path:
    """Write flattened feature rows to a Parquet file.

    Args:
        records: Rows from ``flatten_analyses_for_export()``.
        path:    Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pylist(records, schema=_FEATURE_PA_SCHEMA)
    pq.write_table(table, path)
    return path


def flatten_analyses_for_export(analyses: Sequence[Analysis]) -> list[dict]:
    """Flatten analyses into one row per (analysis, feature).

    Each row carries the analysis metadata (``analysis_id``, ``name``,
    ``category``, ``bias_flag``, ``max_abs``), every feature field, and two
    booleans marking the analysis's top positive / top negative feature.
    Rows keep analysis order, then feature order.
    """
    rows: list[dict] = []
    for analysis in analyses:
        fs = analysis.feature_set
        top_pos = analysis.top_positive.parameter
        top_neg = analysis.top_negative.parameter
        for f in fs.features:
            rows.append(
                {
                    "analysis_id":     analysis.analysis_id,
                    "name":            analysis.name,
                    "category":        analysis.category.value,
                    "bias_flag":       fs.bias_flag,
                    "max_abs":         fs.max_abs,
                    "parameter":       f.parameter,
                    "global_weight":   f.global_weight,
                    "local_weight":    f.local_weight,
                    "global_scaled":   f.global_scaled,
                    "local_scaled":    f.local_scaled,
                    "direction":       f.direction.value,
                    "is_top_positive": f.parameter == top_pos,
                    "is_top_negative": f.parameter == top_neg,
                }
            )
    return rows
