"""
Persisted configuration: where the word corpus lives.

File: $RUWORDLE_CONFIG, else ~/.config/ruwordle/config.yaml

    database: /path/to/words.db
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml

from .errors import ConfigurationMissing, RuWordleError

log = logging.getLogger(__name__)

ENV_VAR = "RUWORDLE_CONFIG"
DATABASE_KEY = "database"


def config_path() -> Path:
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "ruwordle" / "config.yaml"


def load_config(path: Optional[Path] = None) -> Dict:
    """Return the stored settings; a missing file means no settings."""
    p = path or config_path()
    if not p.exists():
        return {}
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RuWordleError(f"Malformed config file {p}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuWordleError(f"Malformed config file {p}: expected a mapping")
    return data


def save_config(cfg: Dict, path: Optional[Path] = None) -> str:
    p = path or config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(yaml.safe_dump(cfg, allow_unicode=True, sort_keys=True), encoding="utf-8")
    log.debug("wrote config %s", p)
    return str(p)


def set_database(location: str, path: Optional[Path] = None) -> str:
    """Store the corpus location as an absolute path; returns the config path."""
    cfg = load_config(path)
    cfg[DATABASE_KEY] = str(Path(location).expanduser().resolve())
    return save_config(cfg, path)


def resolve_database(override: Optional[str] = None, path: Optional[Path] = None) -> str:
    """
    Pick the corpus location: explicit override first, then the config file.
    Raises ConfigurationMissing when neither is available.
    """
    if override:
        return override
    p = path or config_path()
    location = load_config(p).get(DATABASE_KEY)
    if not location:
        raise ConfigurationMissing(str(p))
    return str(location)
