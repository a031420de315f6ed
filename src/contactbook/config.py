"""Settings: optional YAML file plus environment overlay.

Env vars win over YAML values:
CONTACTBOOK_BACKEND, CONTACTBOOK_DIRECTED, CONTACTBOOK_CAPACITY,
CONTACTBOOK_NAME_MATCH, CONTACTBOOK_LOG_LEVEL.
The YAML path comes from the `path` argument or CONTACTBOOK_CONFIG.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml
from dotenv import load_dotenv

from contactbook.domain import NameMatch

BACKEND_CHOICES = ("adjacency_list", "adjacency_matrix", "flat_map")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
ENV_PREFIX = "CONTACTBOOK_"
CONFIG_PATH_ENV = "CONTACTBOOK_CONFIG"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    backend: str = "adjacency_list"
    directed: bool = False
    capacity: int = 100
    name_match: NameMatch | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.backend not in BACKEND_CHOICES:
            raise ValueError(
                f"backend must be one of {', '.join(BACKEND_CHOICES)}; got {self.backend!r}"
            )
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int) or self.capacity <= 0:
            raise ValueError(f"capacity must be a positive integer; got {self.capacity!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}")


def load_env_file() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _parse_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean; got {value!r}")


def _parse_int(key: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer; got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer; got {value!r}") from None


def _coerce(raw: Mapping[str, object], source: str) -> dict:
    """Convert raw YAML/env values to Settings field types. Unknown keys are rejected."""
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown setting(s) in {source}: {', '.join(unknown)}")
    out: dict = {}
    for key, value in raw.items():
        if value is None:
            continue
        if key == "directed":
            out[key] = _parse_bool(key, value)
        elif key == "capacity":
            out[key] = _parse_int(key, value)
        elif key == "name_match":
            try:
                out[key] = NameMatch(str(value).strip().lower())
            except ValueError:
                choices = ", ".join(m.value for m in NameMatch)
                raise ValueError(f"name_match must be one of {choices}; got {value!r}") from None
        elif key == "backend":
            out[key] = str(value).strip().lower()
        elif key == "log_level":
            out[key] = str(value).strip().upper()
    return out


def load_yaml_settings(path: Path) -> dict:
    """Load a YAML settings file and return coerced values. File must hold a mapping."""
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    return _coerce(raw, str(path))


def env_settings(environ: Mapping[str, str]) -> dict:
    raw = {}
    for f in fields(Settings):
        value = environ.get(ENV_PREFIX + f.name.upper(), "").strip()
        if value:
            raw[f.name] = value
    return _coerce(raw, "environment")


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides,
) -> Settings:
    """Build Settings from YAML (optional), then env, then explicit overrides (None ignored).

    Passing `environ` skips .env loading so callers (and tests) control the input fully.
    """
    if environ is None:
        load_env_file()
        environ = os.environ
    values: dict = {}
    if path is None and environ.get(CONFIG_PATH_ENV, "").strip():
        path = environ[CONFIG_PATH_ENV].strip()
    if path is not None:
        values.update(load_yaml_settings(Path(path)))
    values.update(env_settings(environ))
    values.update(_coerce({k: v for k, v in overrides.items() if v is not None}, "overrides"))
    return replace(Settings(), **values)
