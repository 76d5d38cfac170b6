"""Project config (.unsnarl/config.json): detector thresholds and scan filters."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from unsnarl.detectors.facade import DetectorOptions
from unsnarl.utils import PROJECT_ROOT, safe_write_text

CONFIG_FILE = PROJECT_ROOT / ".unsnarl" / "config.json"
logger = logging.getLogger(__name__)

_DEFAULTS = DetectorOptions()


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "long_function_threshold": ConfigKey(
        int, _DEFAULTS.long_function_threshold,
        "Max body line span before a function is reported as too long",
    ),
    "nesting_threshold": ConfigKey(
        int, _DEFAULTS.nesting_threshold,
        "Max nesting depth of if/loop/switch/try/catch constructs",
    ),
    "duplicate_min_lines": ConfigKey(
        int, _DEFAULTS.duplicate_min_lines,
        "Min body line span for duplicate function detection",
    ),
    "duplicate_min_chars": ConfigKey(
        int, _DEFAULTS.duplicate_min_chars,
        "Min canonical shape length for duplicate function detection",
    ),
    "block_min_statements": ConfigKey(
        int, _DEFAULTS.block_min_statements,
        "Min named children for a block to be compared by duplicate-block detection",
    ),
    "complexity_warn_at": ConfigKey(
        int, _DEFAULTS.complexity_warn_at,
        "Cyclomatic complexity labelled high",
    ),
    "complexity_note_at": ConfigKey(
        int, _DEFAULTS.complexity_note_at,
        "Cyclomatic complexity labelled moderate",
    ),
    "disabled_detectors": ConfigKey(list, [], "Detectors skipped by analyze"),
    "bad_names": ConfigKey(
        list, sorted(_DEFAULTS.bad_names), "Identifier names always reported as suspicious"
    ),
    "allowed_single_letters": ConfigKey(
        list, sorted(_DEFAULTS.allowed_single_letters),
        "Single-letter identifiers that are never reported",
    ),
    "exclude": ConfigKey(list, [], "Path patterns to exclude from directory scans"),
}


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from disk and fill missing keys with defaults.

    An unreadable or malformed file falls back to the defaults.
    """
    p = path or CONFIG_FILE
    config: dict[str, Any] = {}
    if p.exists():
        try:
            loaded = json.loads(p.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            logger.debug("Ignoring unreadable config %s: %s", p, exc)
        else:
            if isinstance(loaded, dict):
                config = loaded

    for key, schema in CONFIG_SCHEMA.items():
        if key not in config or not isinstance(config[key], schema.type):
            config[key] = copy.deepcopy(schema.default)
    return config


def save_config(config: dict, path: Path | None = None) -> None:
    """Save config to disk atomically."""
    p = path or CONFIG_FILE
    safe_write_text(p, json.dumps(config, indent=2) + "\n")


def _check_complexity_levels(config: dict) -> None:
    note_at = config.get("complexity_note_at", _DEFAULTS.complexity_note_at)
    warn_at = config.get("complexity_warn_at", _DEFAULTS.complexity_warn_at)
    if note_at > warn_at:
        raise ValueError(
            f"complexity_note_at ({note_at}) must not exceed complexity_warn_at ({warn_at})"
        )


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a config value from a raw string.

    Ints must be non-negative; list keys append the value (deduplicated).
    """
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]

    if schema.type is int:
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"Expected integer for {key}, got: {raw}") from None
        if value < 0:
            raise ValueError(f"Expected non-negative integer for {key}, got: {raw}")
        previous = config.get(key)
        config[key] = value
        try:
            _check_complexity_levels(config)
        except ValueError:
            config[key] = previous
            raise
    elif schema.type is list:
        if key == "disabled_detectors":
            from unsnarl.registry import resolve_detector

            meta = resolve_detector(raw)
            if meta is None:
                raise ValueError(f"Unknown detector for {key}: {raw}")
            raw = meta.name
        config.setdefault(key, [])
        if raw not in config[key]:
            config[key].append(raw)
    else:
        config[key] = raw


def unset_config_value(config: dict, key: str) -> None:
    """Reset a config key to its default value."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")
    config[key] = copy.deepcopy(CONFIG_SCHEMA[key].default)


def options_from_config(config: dict[str, Any]) -> DetectorOptions:
    """Build detector options from a loaded config dict."""
    return DetectorOptions(
        long_function_threshold=config["long_function_threshold"],
        nesting_threshold=config["nesting_threshold"],
        duplicate_min_lines=config["duplicate_min_lines"],
        duplicate_min_chars=config["duplicate_min_chars"],
        block_min_statements=config["block_min_statements"],
        complexity_warn_at=config["complexity_warn_at"],
        complexity_note_at=config["complexity_note_at"],
        bad_names=frozenset(config["bad_names"]),
        allowed_single_letters=frozenset(config["allowed_single_letters"]),
        disabled=frozenset(config["disabled_detectors"]),
    )


__all__ = [
    "CONFIG_FILE",
    "CONFIG_SCHEMA",
    "ConfigKey",
    "default_config",
    "load_config",
    "options_from_config",
    "save_config",
    "set_config_value",
    "unset_config_value",
]
