#!/usr/bin/env python3
# cmdmap/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in the config directory (CWD by default): .env, config.ini,
     config.json, config.toml
  3) Environment variables (recognized keys only)

Validation:
  - COMMANDS_PACKAGE: dotted module path
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH / HISTORY_FILE_PATH: None or normalized path
  - ENABLE_COMPLETION / STRICT_REGISTRATION: bool
  - PROMPT: str
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import configparser
import json
import os
import re
import tomllib

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "COMMANDS_PACKAGE": "plugins",
    "LOG_LEVEL": "INFO",
    "LOG_FILE_PATH": None,
    "PROMPT": "> ",
    "ENABLE_COMPLETION": True,
    "STRICT_REGISTRATION": False,
    "HISTORY_FILE_PATH": str(Path.home() / ".cmdmap_history"),
}

_MODULE_PATH_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*")

# ---------- data model ----------


@dataclass(frozen=True)
class AppConfig:
    commands_package: str
    log_level: str
    log_file_path: Path | None
    prompt: str
    enable_completion: bool
    strict_registration: bool
    history_file_path: Path

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    # No interpolation: prompts and paths may contain '%'.
    cfg = configparser.ConfigParser(interpolation=None)
    if not cfg.read(path, encoding="utf-8"):
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return data if isinstance(data, dict) else {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'DEBUG'}} -> {'LOG_LEVEL': 'DEBUG'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path) -> list[Path]:
    return [
        base / ".env",
        base / "config.ini",
        base / "config.json",
        base / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val) or DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_path(val: Any) -> Path:
    s = os.path.expandvars(os.path.expanduser(str(val)))
    return Path(s).resolve()


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    return None if v is None else _as_path(v)


def _as_module_path(val: Any) -> str:
    s = str(val).strip()
    if not _MODULE_PATH_RE.fullmatch(s):
        raise ValueError(f"COMMANDS_PACKAGE must be a dotted module path, got {val!r}")
    return s


# ---------- merge & load ----------

def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


def _merge_sources(base: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only recognized keys are taken
    merged.update({k: v for k, v in environ.items() if k in DEFAULTS})
    return merged


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any]) -> AppConfig:
    history = _as_opt_path(config.get("HISTORY_FILE_PATH")) or _as_path(
        DEFAULTS["HISTORY_FILE_PATH"])
    prompt = config.get("PROMPT")
    extra = {k: v for k, v in config.items() if k not in DEFAULTS}

    return AppConfig(
        commands_package=_as_module_path(
            config.get("COMMANDS_PACKAGE", DEFAULTS["COMMANDS_PACKAGE"])),
        log_level=_as_log_level(config.get("LOG_LEVEL")),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        prompt=DEFAULTS["PROMPT"] if prompt is None else str(prompt),
        enable_completion=_as_bool(config.get(
            "ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        strict_registration=_as_bool(config.get(
            "STRICT_REGISTRATION", DEFAULTS["STRICT_REGISTRATION"])),
        history_file_path=history,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects. Raises ValueError on invalid values.
    """
    raw = _merge_sources(
        Path(base) if base is not None else Path.cwd(),
        os.environ if environ is None else environ,
    )
    return _validate_and_build(raw)
