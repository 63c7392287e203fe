"""Lazy JSON configuration for world and physics tunables."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

_ENV_KEY = "SANDBOX_CONFIG"
_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "config" / "sandbox.json"
_CONFIG_PATH: Path = Path(os.environ.get(_ENV_KEY, _DEFAULT_PATH))
_CONFIG_DATA: Dict[str, Any] = {}


def _load() -> Dict[str, Any]:
    try:
        with _CONFIG_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("failed to load config %s: %s", _CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("config %s must hold a JSON object, got %s", _CONFIG_PATH, type(data).__name__)
        return {}
    return data


def _ensure_loaded() -> None:
    global _CONFIG_DATA
    if not _CONFIG_DATA:
        _CONFIG_DATA = _load()


def use_file(path: Optional[Union[str, Path]] = None) -> None:
    """Point the loader at ``path`` (or back at the default) and drop the cache."""
    global _CONFIG_PATH, _CONFIG_DATA
    _CONFIG_PATH = Path(path) if path is not None else _DEFAULT_PATH
    _CONFIG_DATA = {}


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    _ensure_loaded()
    if not path:
        return _CONFIG_DATA

    current: Any = _CONFIG_DATA
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def section(name: str) -> Dict[str, Any]:
    """Copy of a top-level table such as ``"physics"``; empty when absent."""
    value = get(name, {})
    return dict(value) if isinstance(value, dict) else {}
