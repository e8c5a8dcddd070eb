"""
ASCII terminal formatters for CLI output.

All formatters accept model objects and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from collections.abc import Sequence

from weight_analyzer.models.analysis import Analysis, CategorySummary, Prediction
from weight_analyzer.models.feature import Feature


def format_analysis_table(
    analysis: Analysis,
    corrections: Sequence[Feature] = (),
) -> str:
    """Format one analysis as a feature table.

    Example::

        === Cystic Fibrosis (genetic) ===  [BIAS FLAG]
          Top positive: gene_marker_A (+0.912)
          Top negative: bmi (-0.774)

          Parameter                  Global    Local  G.Scaled  L.Scaled  Direction
          ---------------------------------------------------------------------------
          age                        +0.123   -0.456    +0.125    -0.463   POSITIVE

    Args:
        analysis:    The analysis to render.
        corrections: Sign-flip features to list under the table, if any.
    """
    fs = analysis.feature_set
    flag = "[BIAS FLAG]" if fs.bias_flag else "[STABLE]"
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {analysis.name} ({analysis.category.value}) ===  {flag}")
    lines.append(
        f"  Top positive: {analysis.top_positive.parameter} "
        f"({analysis.top_positive.global_weight:+.3f})"
    )
    lines.append(
        f"  Top negative: {analysis.top_negative.parameter} "
        f"({analysis.top_negative.global_weight:+.3f})"
    )
    lines.append(f"  Normalization: {fs.normalization_method} (max_abs={fs.max_abs:.4g})")
    lines.append("")

    header = (
        f"  {'Parameter':<24}  {'Global':>8}  {'Local':>8}  "
        f"{'G.Scaled':>8}  {'L.Scaled':>8}  {'Direction':>9}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for f in fs.features:
        lines.append(
            f"  {f.parameter[:24]:<24}  {f.global_weight:>+8.3f}  "
            f"{f.local_weight:>+8.3f}  {f.global_scaled:>+8.3f}  "
            f"{f.local_scaled:>+8.3f}  {f.direction.value:>9}"
        )

    if corrections:
        lines.append("")
        lines.append(f"  Sign flips requiring audit ({len(corrections)}):")
        for f in corrections:
            lines.append(
                f"    {f.parameter}: global {f.global_weight:+.3f} vs "
                f"local {f.local_weight:+.3f}"
            )

    return "\n".join(lines)


def format_category_summary(summary: CategorySummary) -> str:
    """Format a category roll-up as a short block."""
    lines = [
        "",
        f"=== Category summary: {summary.category.value} ===",
        f"  Analyses:      {summary.total_analyses}",
        f"  Bias flagged:  {summary.biased_count} ({summary.bias_percentage:.1f}%)",
        f"  Top catalyst:  {summary.top_catalyst or 'N/A'}",
    ]
    return "\n".join(lines)


def format_prediction(prediction: Prediction) -> str:
    """Format a prediction as a one-line verdict plus score details."""
    tier = "HIGH" if prediction.confidence >= 0.8 else "LOW"
    return "\n".join([
        f"  Outcome:          {prediction.outcome.value}",
        f"  Confidence:       {prediction.confidence:.1%} ({tier})",
        f"  Score:            {prediction.score:+.4f}",
        f"  Normalized score: {prediction.normalized_score:+.4f}",
    ])
