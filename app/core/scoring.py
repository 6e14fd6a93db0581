from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "scoring.yaml"

_cached_config: dict[str, Any] | None = None


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(f"Scoring config not found at '{path}'. Expected file: config/scoring.yaml")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Keyword limits and endpoint rate limits from config/scoring.yaml, loaded once."""
    global _cached_config

    if _cached_config is None:
        _cached_config = _read_mapping(SCORING_CONFIG_PATH)
    return _cached_config


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted path such as 'rate_limits.resume_analyze.limit'."""
    if not path:
        return default

    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def get_scoring_int(path: str, default: int) -> int:
    value = get_scoring_value(path, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
