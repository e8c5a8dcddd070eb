"""
Logging setup for the weight analyzer CLI.

``configure_logging`` is called by each CLI command right after the config
is loaded. Library modules only ever do ``logging.getLogger(__name__)``.

What gets logged:
  - ``engine.normalizer``: WARNING on duplicate parameters, DEBUG per run
    with the ``max_abs`` constant and bias flag.
  - ``engine.predictor``: DEBUG per prediction with the raw and normalized
    score.
  - ``analysis.builder``: INFO per simulated category, with ``category``,
    ``analyses`` and ``biased_count`` attached as record fields.

Records go to stderr; stdout is reserved for command output (FeatureSet and
Prediction JSON, analysis tables). With ``json_format = true`` every record
is one JSON object and the record fields above become top-level keys::

    {"ts": "2026-10-19T15:00:00Z", "level": "INFO",
     "logger": "weight_analyzer.analysis.builder",
     "msg": "Analyzed category genetic: ...", "category": "genetic",
     "analyses": 10, "biased_count": 2}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weight_analyzer.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from extra=.
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    plus any ``extra=`` fields such as ``category``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for key, val in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                payload[key] = val
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig", debug: bool = False) -> None:
    """Install stderr (and optionally file) handlers on the root logger.

    Args:
        config: ``[logging]`` section of ``AppConfig``.
        debug:  ``AppConfig.debug``; forces DEBUG so per-run normalizer and
                predictor records are shown regardless of ``config.level``.
    """
    level = logging.DEBUG if debug else getattr(logging, config.level, logging.INFO)

    formatter: logging.Formatter
    if config.json_format:
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    handlers.append(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Parquet exports go through pyarrow.
    logging.getLogger("pyarrow").setLevel(logging.WARNING)
