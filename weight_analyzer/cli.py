"""
Weight Analyzer: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Run the engine (normalize, predict, or a simulated category analysis).
  5. Report result to stdout.

Install and run::

    pip install -e .
    weight-analyzer --help
    weight-analyzer validate-config
    weight-analyzer list-categories
    weight-analyzer normalize --request normalize_request.json
    weight-analyzer predict --request predict_request.json
    weight-analyzer simulate --category genetic --seed 42 --export
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="weight-analyzer",
    help="Global vs. local model weight analyzer: local research CLI.",
    add_completion=False,
)

_EXPORT_FORMATS = ("json", "csv", "parquet")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from weight_analyzer.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from weight_analyzer.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


def _read_request_or_exit(request_file: str, model_cls):
    """Parse a JSON request document into ``model_cls`` or exit with code 1."""
    from pydantic import ValidationError

    path = Path(request_file)
    if not path.exists():
        typer.echo(f"[ERROR] Request file not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        typer.echo(f"[ERROR] JSON parse error: {exc}", err=True)
        raise typer.Exit(code=1)
    try:
        return model_cls.model_validate(raw)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid request:\n{exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Sensitive marker:   {config.engine.sensitive_marker}")
    typer.echo(f"  Bias threshold:     {config.engine.bias_threshold}")
    typer.echo(f"  Decision threshold: {config.engine.decision_threshold}")
    typer.echo(f"  Simulation seed:    {config.simulation.seed}")
    typer.echo(f"  Categories file:    {config.data.categories_file}")
    typer.echo(f"  Log level:          {config.logging.level}")
    typer.echo(f"  Debug mode:         {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("list-categories")
def list_categories_cmd(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """List registered categories with their diseases and parameters."""
    from weight_analyzer.registry import list_categories

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        specs = list_categories(config.data.categories_file)
    except Exception as exc:
        typer.echo(f"[ERROR] Could not load category registry: {exc}", err=True)
        raise typer.Exit(code=1)

    for spec in specs:
        typer.echo(f"[{spec.category.value}] {spec.display_name}")
        typer.echo(f"  Diseases ({len(spec.diseases)}): {', '.join(spec.diseases)}")
        typer.echo(f"  Parameters ({len(spec.parameters)}): {', '.join(spec.parameters)}")


@app.command("normalize")
def normalize_cmd(
    request_file: str = typer.Option(
        ...,
        "--request",
        "-r",
        help=(
            "JSON file with {parameters, global_weights, local_weights} "
            "(camelCase keys accepted)."
        ),
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the FeatureSet JSON here instead of stdout.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Normalize a pair of weight maps into a FeatureSet (JSON)."""
    from weight_analyzer.engine.normalizer import normalize
    from weight_analyzer.models.requests import NormalizeRequest
    from weight_analyzer.reporting.export import export_to_json

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    request = _read_request_or_exit(request_file, NormalizeRequest)
    feature_set = normalize(
        request.parameters,
        request.global_weights,
        request.local_weights,
        sensitive_marker=config.engine.sensitive_marker,
        bias_threshold=config.engine.bias_threshold,
    )
    payload = feature_set.model_dump(mode="json")

    if output_file:
        written = export_to_json(payload, Path(output_file))
        typer.echo(f"[OK] FeatureSet written to {written}")
    else:
        typer.echo(json.dumps(payload, indent=2))


@app.command("predict")
def predict_cmd(
    request_file: str = typer.Option(
        ...,
        "--request",
        "-r",
        help="JSON file with {feature_set, input} (camelCase keys accepted).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the prediction as JSON instead of a summary.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score an input record against a FeatureSet's global weights."""
    from weight_analyzer.engine.predictor import predict
    from weight_analyzer.models.requests import PredictRequest
    from weight_analyzer.reporting.formatters import format_prediction

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    request = _read_request_or_exit(request_file, PredictRequest)
    prediction = predict(
        request.feature_set,
        request.input,
        decision_threshold=config.engine.decision_threshold,
    )

    if as_json:
        typer.echo(json.dumps(prediction.model_dump(mode="json"), indent=2))
    else:
        typer.echo(format_prediction(prediction))


@app.command("simulate")
def simulate(
    category: str = typer.Option(
        ...,
        "--category",
        "-c",
        help="Category slug (genetic, sexual, mental).",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for simulated weights (overrides config.simulation.seed).",
    ),
    query: str = typer.Option(
        "",
        "--query",
        "-q",
        help="Only show diseases whose name contains this text (case-insensitive).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Directory to write the export into (implies --export).",
    ),
    export: bool = typer.Option(
        False,
        "--export",
        help="Export the analyses to config.data.output_dir.",
    ),
    export_format: str = typer.Option(
        "json",
        "--format",
        help="Export format: json, csv or parquet.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Analyze every disease in a category using simulated weights.

    Prints one table per disease plus a category summary.  With
    ``--export`` the analyses are also written to ``config.data.output_dir``;
    ``--output-dir`` writes them to another directory instead.
    """
    from weight_analyzer.analysis.builder import (
        analyze_category,
        filter_analyses,
        summarize_category,
    )
    from weight_analyzer.engine.selector import sign_flip_corrections
    from weight_analyzer.registry import get_category_spec
    from weight_analyzer.reporting.export import (
        FEATURE_EXPORT_COLUMNS,
        export_to_csv,
        export_to_json,
        export_to_parquet,
        flatten_analyses_for_export,
    )
    from weight_analyzer.reporting.formatters import (
        format_analysis_table,
        format_category_summary,
    )
    from weight_analyzer.simulation import SimulatedWeightSource

    if export_format not in _EXPORT_FORMATS:
        typer.echo(
            f"[ERROR] --format must be one of {list(_EXPORT_FORMATS)}, "
            f"got '{export_format}'.",
            err=True,
        )
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        spec = get_category_spec(category, config.data.categories_file)
    except (KeyError, FileNotFoundError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    source = SimulatedWeightSource(
        seed=seed if seed is not None else config.simulation.seed,
        low=config.simulation.weight_low,
        high=config.simulation.weight_high,
    )
    analyses = analyze_category(spec, source, config.engine)
    summary = summarize_category(spec.category, analyses)
    shown = filter_analyses(analyses, query)

    for analysis in shown:
        corrections = sign_flip_corrections(
            analysis.feature_set.features,
            config.engine.sign_flip_min_weight,
        )
        typer.echo(format_analysis_table(analysis, corrections))

    if query and not shown:
        typer.echo(f"\n  (no diseases match '{query}')")

    typer.echo(format_category_summary(summary))

    if output_dir or export:
        out_dir = Path(output_dir or config.data.output_dir)
        stem = f"analyses_{spec.category.value}"
        if export_format == "json":
            written = export_to_json(
                {
                    "summary": summary.model_dump(mode="json"),
                    "analyses": [a.model_dump(mode="json") for a in shown],
                },
                out_dir / f"{stem}.json",
            )
        elif export_format == "csv":
            written = export_to_csv(
                flatten_analyses_for_export(shown),
                out_dir / f"{stem}.csv",
                fieldnames=FEATURE_EXPORT_COLUMNS,
            )
        else:
            written = export_to_parquet(
                flatten_analyses_for_export(shown),
                out_dir / f"{stem}.parquet",
            )
        typer.echo(f"\n[OK] Exported {len(shown)} analyses to {written}")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
