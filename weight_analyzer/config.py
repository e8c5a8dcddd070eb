"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      : committed static defaults
  2. ``config/local.toml``        : optional local overrides (gitignored)
  3. ``.env``                     : local overrides (gitignored)
  4. Environment variables        : ``WEIGHT_ANALYZER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance and hand the relevant
sub-config to the engine. The engine itself never reads the environment.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class EngineConfig(BaseModel):
    """Thresholds used by the normalizer, selector and predictor."""

    model_config = ConfigDict(frozen=True)

    sensitive_marker: str = "gene_marker"
    bias_threshold: float = 0.85
    decision_threshold: float = 0.1
    sign_flip_min_weight: float = 0.1

    @field_validator("sensitive_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if not v:
            raise ValueError("sensitive_marker must not be empty.")
        return v

    @field_validator("bias_threshold")
    @classmethod
    def validate_bias_threshold(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ValueError(f"bias_threshold must be in (0.0, 1.0], got {v}.")
        return v

    @field_validator("sign_flip_min_weight")
    @classmethod
    def validate_sign_flip_min_weight(cls, v: float) -> float:
        if v < 0.0:
            raise ValueError(f"sign_flip_min_weight must be >= 0, got {v}.")
        return v


class SimulationConfig(BaseModel):
    """Synthetic weight generation settings."""

    model_config = ConfigDict(frozen=True)

    seed: Optional[int] = None
    weight_low: float = -1.0
    weight_high: float = 1.0

    @model_validator(mode="after")
    def validate_bounds(self) -> "SimulationConfig":
        if self.weight_low >= self.weight_high:
            raise ValueError(
                f"weight_low ({self.weight_low}) must be < "
                f"weight_high ({self.weight_high})."
            )
        return self


class DataConfig(BaseModel):
    """Filesystem paths for the category registry and exports."""

    model_config = ConfigDict(frozen=True)

    categories_file: str = "config/categories.toml"
    output_dir: str = "data/outputs"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration: the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    engine: EngineConfig = EngineConfig()
    simulation: SimulationConfig = SimulationConfig()
    data: DataConfig = DataConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply WEIGHT_ANALYZER_* env vars to the raw config dict.

    Supported overrides:
      WEIGHT_ANALYZER_LOG_LEVEL         → raw["logging"]["level"]
      WEIGHT_ANALYZER_SENSITIVE_MARKER  → raw["engine"]["sensitive_marker"]
      WEIGHT_ANALYZER_SEED              → raw["simulation"]["seed"]
      WEIGHT_ANALYZER_DEBUG             → raw["debug"]
    """
    if log_level := os.environ.get("WEIGHT_ANALYZER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if marker := os.environ.get("WEIGHT_ANALYZER_SENSITIVE_MARKER"):
        raw.setdefault("engine", {})["sensitive_marker"] = marker

    if seed := os.environ.get("WEIGHT_ANALYZER_SEED"):
        raw.setdefault("simulation", {})["seed"] = int(seed)

    if debug := os.environ.get("WEIGHT_ANALYZER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        engine=EngineConfig(**raw.get("engine", {})),
        simulation=SimulationConfig(**raw.get("simulation", {})),
        data=DataConfig(**raw.get("data", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
