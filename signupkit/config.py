# signupkit/config.py
"""
Settings persistence for signupkit.
Settings saved as JSON in %APPDATA%/Signupkit/config.json (Windows) or
~/.signupkit/config.json (fallback). SIGNUPKIT_HOME overrides the directory.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "availability_delay_ms": 650,
    "debounce_ms": 500,
    "submit_delay_ms": 800,
    "toast_seconds": 3,
    "clipboard_clear_seconds": 20,
    "draft_path": None,  # if None, drafts.default_draft_path() is used
    "log_level": "WARNING",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def appdata_dir() -> str:
    home = os.getenv("SIGNUPKIT_HOME")
    if home:
        d = home
    elif os.getenv("APPDATA"):
        d = os.path.join(os.getenv("APPDATA"), "Signupkit")
    else:
        d = os.path.join(os.path.expanduser("~"), ".signupkit")
    os.makedirs(d, exist_ok=True)
    return d


def config_path() -> str:
    return os.path.join(appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def seconds(cfg: Dict[str, Any], key: str) -> float:
    """Read a *_ms setting as seconds."""
    value = cfg.get(key, DEFAULTS[key])
    try:
        ms = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a whole number of milliseconds",
                                 code="BAD_SETTING", detail=repr(value)) from None
    if ms < 0:
        raise ConfigurationError(f"{key} must not be negative", code="BAD_SETTING", detail=repr(value))
    return ms / 1000.0


def configure_logging(level: Optional[str] = None) -> None:
    name = (level or DEFAULTS["log_level"]).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING), format=LOG_FORMAT)
