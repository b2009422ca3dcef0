"""Scoring parameters read from ``config/scoring.yaml``.

Keyword thresholds, the ATS bonus rule and the text-quality penalties all live
in the YAML file so they can be tuned without touching code. Lookups take a
dot path (``"ats.bonus.points"``) and a default used when the key is absent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"

_cache: dict[str, Any] | None = None


def _read_scoring_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
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
    global _cache
    if _cache is None:
        _cache = _read_scoring_file(SCORING_CONFIG_PATH)
    return _cache


def get_scoring_value(path: str, default: Any = None) -> Any:
    if not path:
        return default

    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def _coerce(path: str, default: Any, cast):
    try:
        return cast(get_scoring_value(path, default))
    except (TypeError, ValueError):
        return default


def get_scoring_int(path: str, default: int) -> int:
    return _coerce(path, default, int)


def get_scoring_float(path: str, default: float) -> float:
    return _coerce(path, default, float)
