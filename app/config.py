# app/config.py
from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List
import logging

from utils.file_handler import read_json

log = logging.getLogger(__name__)

SETTINGS_PATH = Path("data/settings.json")


@dataclass
class Settings:
    text_size_options: List[int] = field(default_factory=lambda: [10, 25, 50, 100])
    time_limit_options: List[int] = field(default_factory=lambda: [15, 30, 60, 120])
    default_text_size: int = 50
    default_time_limit: int = 30
    abort_key: str = "Escape"
    start_key: str = "Enter"
    words_file: str = "assets/texts/words.txt"
    theme: str = "Dark"


def load_settings(path: Path | str = SETTINGS_PATH) -> Settings:
    """
    Read overrides from a JSON object. A missing file means defaults;
    a broken file is logged and ignored.
    """
    settings = Settings()
    path = Path(path)
    if not path.exists():
        return settings
    try:
        data = read_json(path)
    except (OSError, ValueError) as e:
        log.warning("Failed to read settings from %s: %s", path, e)
        return settings
    if not isinstance(data, dict):
        log.warning("Settings file %s does not hold an object, using defaults", path)
        return settings

    known = {f.name for f in fields(Settings)}
    for key, value in data.items():
        if key not in known:
            log.warning("Unknown setting %r ignored", key)
            continue
        if not _matches(value, getattr(settings, key)):
            log.warning("Setting %r has invalid value %r, keeping default", key, value)
            continue
        setattr(settings, key, value)
    return settings


def _is_int(value) -> bool:
    # bool is an int subclass; true/false is not a size
    return isinstance(value, int) and not isinstance(value, bool)


def _matches(value, default) -> bool:
    if isinstance(default, list):
        return isinstance(value, list) and all(_is_int(v) for v in value)
    if _is_int(default):
        return _is_int(value)
    return isinstance(value, type(default))
