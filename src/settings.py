"""Static configuration for tweetsieve.

All user-editable settings (classification thresholds, file naming, logging)
live in a single JSON file for quick edits without touching Python. Every key
is optional; a missing file means defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from adapters.filesystem_source import DEFAULT_PATTERN
from adapters.json_sink import FILTERED_SUFFIX, RAW_SUFFIX
from adapters.run_report import DEFAULT_LOG_NAME
from core.config import DEFAULT_LANGUAGE, DEFAULT_NON_ASCII_THRESHOLD, FilterConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Environment variable that points at an alternative config file.
CONFIG_ENV_VAR = "TWEETSIEVE_CONFIG"

# Default config location, used when the environment does not override it.
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    filter: FilterConfig = field(default_factory=FilterConfig)
    pattern: str = DEFAULT_PATTERN
    raw_suffix: str = RAW_SUFFIX
    filtered_suffix: str = FILTERED_SUFFIX
    # Relative report paths are resolved against the scanned root.
    report_path: str = DEFAULT_LOG_NAME
    logging: dict = field(default_factory=dict)


def resolve_config_path(explicit: Optional[str] = None) -> str:
    """Return the config path: explicit argument, then env var, then default."""

    if explicit:
        return explicit
    # .env lets users point at a config without exporting variables.
    load_dotenv()
    return os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def _load_json_config(path: str) -> dict:
    """Load the config file with a flat, user-friendly schema."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        config = json.load(handle)
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return config


def load_settings(path: Optional[str] = None) -> Settings:
    """Build Settings from the config file, falling back to defaults."""

    config = _load_json_config(resolve_config_path(path))

    _filter = config.get("filter") or {}
    filter_config = FilterConfig(
        language=str(_filter.get("language", DEFAULT_LANGUAGE)),
        non_ascii_threshold=float(_filter.get("non_ascii_threshold", DEFAULT_NON_ASCII_THRESHOLD)),
    )

    _input = config.get("input") or {}
    _output = config.get("output") or {}
    _report = config.get("report") or {}

    return Settings(
        filter=filter_config,
        pattern=str(_input.get("pattern", DEFAULT_PATTERN)),
        raw_suffix=str(_output.get("raw_suffix", RAW_SUFFIX)),
        filtered_suffix=str(_output.get("filtered_suffix", FILTERED_SUFFIX)),
        report_path=str(_report.get("path", DEFAULT_LOG_NAME)),
        logging=config.get("logging") or {},
    )
