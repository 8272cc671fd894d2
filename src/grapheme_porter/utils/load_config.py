# src/grapheme_porter/utils/load_config.py

"""Load JSON settings from a <data/> directory with caching and typed coercions.

Modes:
- "raw"             -> return parsed JSON as-is
- "set"             -> return frozenset[str] (coerce scalars to str)
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by the text-level settings (stemmer.json, protected_words.json) and tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# --- optional json5 support (no hard dependency) -----------------------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "set", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_ENV_VARS = ("DATA_DIR", "PORTER_DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _read(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _coerce(path: Path, data: Any, mode: Mode) -> Any:
    if mode == "raw":
        return data

    if mode == "set":
        if not isinstance(data, list):
            raise ConfigTypeError(
                f"{path.name}: expected list for mode 'set', got {type(data).__name__}"
            )
        non_scalars = [
            x for x in data if not isinstance(x, (str, int, float, bool)) and x is not None
        ]
        if non_scalars:
            preview = ", ".join(f"{type(x).__name__}" for x in non_scalars[:3])
            raise ConfigTypeError(
                f"{path.name}: list must contain only scalars for 'set' "
                f"(first bad types: {preview})"
            )
        return frozenset(map(str, data))

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        return data

    raise ValueError(f"Unknown mode '{mode}'")


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results.

    The data directory is resolved as: explicit ``base_dir`` > env
    (``DATA_DIR``, ``PORTER_DATA_DIR``) > first ``data/`` found walking up
    from this module. Results are cached per (path, mtime, mode) unless a
    ``validator`` is given, since its output may differ between calls.
    """
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = base_dir.resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)

    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    result = _coerce(path, _read(path, encoding, allow_comments), mode)

    if validator is not None:
        if mode != "validated_dict":
            raise ValueError("validator is only supported with mode 'validated_dict'")
        try:
            result = validator(result)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        log.debug("Config loaded (validator present, not cached): %s", path.name)
        return result

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
