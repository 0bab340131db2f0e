from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Iterator

import yaml

from .models import KantaSettings

CONFIG_ENV_VAR = "KANTA_CONFIG"
CONFIG_FILE_NAME = "kanta.yaml"

logger = logging.getLogger(__name__)

_settings: KantaSettings | None = None
_active: ContextVar[KantaSettings | None] = ContextVar("kanta_active_settings", default=None)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_settings(path: Path) -> KantaSettings:
    settings_path = path
    if settings_path.is_dir():
        settings_path = settings_path / CONFIG_FILE_NAME
    if not settings_path.is_file():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")
    data = _load_yaml(settings_path)
    boundaries = data.get("source_boundaries")
    if isinstance(boundaries, list):
        resolved: list[object] = []
        for entry in boundaries:
            if isinstance(entry, str) and not Path(entry).is_absolute():
                resolved.append(str((settings_path.parent / entry).resolve()))
            else:
                resolved.append(entry)
        data["source_boundaries"] = resolved
    logger.debug("Loaded kanta settings from %s", settings_path)
    return KantaSettings.model_validate(data)


def get_settings() -> KantaSettings:
    """Settings used when a call does not pass its own.

    Set explicitly with configure(), otherwise read once from the file named by
    KANTA_CONFIG, otherwise the defaults.
    """
    global _settings
    if _settings is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            _settings = load_settings(Path(env_path))
        else:
            _settings = KantaSettings()
    return _settings


def configure(settings: KantaSettings | None) -> None:
    """Replace the cached settings; None drops the cache so they are reloaded."""
    global _settings
    _settings = settings


@contextmanager
def using_settings(settings: KantaSettings) -> Iterator[KantaSettings]:
    """Make ``settings`` the active settings for the duration of the block."""
    token = _active.set(settings)
    try:
        yield settings
    finally:
        _active.reset(token)


def active_settings() -> KantaSettings:
    """Settings of the assertion being executed, else get_settings()."""
    settings = _active.get()
    if settings is not None:
        return settings
    return get_settings()
