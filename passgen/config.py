# passgen/config.py
"""
Simple settings persistence for PassGen.
Settings saved as JSON in %APPDATA%/PassGen/config.json (Windows) or ~/.passgen/config.json (fallback).
PASSGEN_CONFIG points at another file; PORT overrides the listen port.
"""

import os
import json
import logging
from typing import Dict, Any

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "host": "127.0.0.1",
    "port": 3000,
    "debug": False,
    "log_level": "INFO",
    "cors_origin": "*",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassGen")
    return os.path.join(os.path.expanduser("~"), ".passgen")

def config_path() -> str:
    return os.getenv("PASSGEN_CONFIG") or os.path.join(_appdata_dir(), "config.json")

def _valid_port(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 < value < 65536

def _valid_log_level(value: Any) -> bool:
    # getLevelName maps known names to their int value
    return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)

VALIDATORS = {
    "host": lambda v: isinstance(v, str) and bool(v),
    "port": _valid_port,
    "debug": lambda v: isinstance(v, bool),
    "log_level": _valid_log_level,
    "cors_origin": lambda v: isinstance(v, str) and bool(v),
}

def is_valid(key: str, value: Any) -> bool:
    check = VALIDATORS.get(key)
    return check is not None and check(value)

def _apply_env(cfg: Dict[str, Any]) -> Dict[str, Any]:
    port = os.getenv("PORT")
    if port:
        try:
            value = int(port)
        except ValueError:
            value = None
        if _valid_port(value):
            cfg["port"] = value
        else:
            logger.warning("ignoring invalid PORT=%r", port)
    return cfg

def _read_file(p: str) -> Dict[str, Any]:
    if not os.path.exists(p):
        return {}
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read config %s, using defaults: %s", p, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("config %s is not a JSON object, using defaults", p)
        return {}
    return data

def load_config() -> Dict[str, Any]:
    p = config_path()
    out = DEFAULTS.copy()
    # merge defaults, keeping only well-typed known keys
    for key, value in _read_file(p).items():
        if key not in DEFAULTS:
            continue
        if is_valid(key, value):
            out[key] = value
        else:
            logger.warning("invalid %s=%r in %s, using default %r", key, value, p, DEFAULTS[key])
    return _apply_env(out)

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def set_option(key: str, raw: str) -> Any:
    """
    Store one setting in the config file. `raw` is parsed as JSON when
    possible (so 8080 and false keep their types), otherwise taken as text.
    """
    if key not in DEFAULTS:
        raise InvalidConfigError(f"Unknown setting '{key}'; choose one of: {', '.join(DEFAULTS)}")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    if not is_valid(key, value):
        raise InvalidConfigError(f"Invalid value for {key}: {raw!r}")
    stored = _read_file(config_path())
    stored[key] = value
    save_config(stored)
    return value
