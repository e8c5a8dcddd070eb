"""
Shared pytest fixtures for the weight analyzer test suite.

Provides:
  - Small parameter lists and weight maps reused across engine tests.
  - ``genetic_spec``: a ``CategorySpec`` built in memory (no TOML file).
  - ``categories_toml`` / ``config_toml``: temporary config files for
    registry and CLI tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from weight_analyzer.engine.normalizer import normalize
from weight_analyzer.models.category import CategorySpec
from weight_analyzer.models.feature import FeatureSet
from weight_analyzer.registry import clear_registry_cache
from weight_analyzer.taxonomy.weight_taxonomy import Category


@pytest.fixture(autouse=True)
def _reset_registry_cache():
    clear_registry_cache()
    yield
    clear_registry_cache()


# ── Engine inputs ─────────────────────────────────────────────────────────────

@pytest.fixture
def sample_parameters() -> list[str]:
    return ["age", "bmi", "gene_marker_A", "stress_level"]


@pytest.fixture
def sample_global_weights() -> dict[str, float]:
    return {"age": 0.4, "bmi": -0.8, "gene_marker_A": 2.0, "stress_level": 0.0}


@pytest.fixture
def sample_local_weights() -> dict[str, float]:
    return {"age": -0.2, "bmi": -1.0, "gene_marker_A": 1.5}


@pytest.fixture
def sample_feature_set(
    sample_parameters, sample_global_weights, sample_local_weights
) -> FeatureSet:
    """max_abs = 2.0 (gene_marker_A global)."""
    return normalize(sample_parameters, sample_global_weights, sample_local_weights)


@pytest.fixture
def genetic_spec() -> CategorySpec:
    return CategorySpec(
        category=Category.GENETIC,
        display_name="Genetic",
        diseases=("Cystic Fibrosis", "Down Syndrome", "Hemophilia"),
        parameters=("age", "bmi", "gene_marker_A", "gene_marker_B"),
    )


# ── Config files ──────────────────────────────────────────────────────────────

CATEGORIES_TOML = """\
[common]
parameters = ["age", "bmi"]

[categories.genetic]
display_name = "Genetic"
diseases = ["Cystic Fibrosis", "Down Syndrome", "Turner Syndrome"]
parameters = ["gene_marker_A", "gene_marker_B"]

[categories.mental]
display_name = "Mental"
diseases = ["ADHD", "OCD"]
parameters = ["stress_level", "age"]
"""


@pytest.fixture
def categories_toml(tmp_path: Path) -> Path:
    path = tmp_path / "categories.toml"
    path.write_text(CATEGORIES_TOML, encoding="utf-8")
    return path


@pytest.fixture
def config_toml(tmp_path: Path, categories_toml: Path) -> Path:
    """A full config pointing at the temporary categories file."""
    path = tmp_path / "default.toml"
    path.write_text(
        "[engine]\n"
        'sensitive_marker = "gene_marker"\n'
        "bias_threshold = 0.85\n"
        "decision_threshold = 0.1\n"
        "\n"
        "[simulation]\n"
        "seed = 7\n"
        "\n"
        "[data]\n"
        f'categories_file = "{categories_toml.as_posix()}"\n'
        f'output_dir = "{(tmp_path / "out").as_posix()}"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return path
