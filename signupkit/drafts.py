"""
signupkit.drafts
Local draft of the signup form. Only the email and the terms checkbox are
kept; the password never touches disk.
"""

import os
import json
import logging
from typing import Dict, Optional, Any

from .config import appdata_dir
from .errors import StorageError

logger = logging.getLogger(__name__)


def default_draft_path() -> str:
    return os.path.join(appdata_dir(), "signup-draft.json")


def _atomic_write_json(path: str, obj: Dict[str, Any]) -> None:
    """Write to a temp file next to 'path' and rename over it."""
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


class DraftStore:
    def __init__(self, path: Optional[str] = None):
        self.path = path or default_draft_path()

    def load(self) -> Optional[Dict[str, Any]]:
        """Return {"email", "terms"} with whichever values are well-typed, or None."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug("Discarding unreadable draft %s: %s", self.path, e)
            return None
        if not isinstance(data, dict):
            return None
        draft: Dict[str, Any] = {}
        if isinstance(data.get("email"), str):
            draft["email"] = data["email"]
        if isinstance(data.get("terms"), bool):
            draft["terms"] = data["terms"]
        return draft

    def save(self, email: str, terms: bool) -> None:
        try:
            _atomic_write_json(self.path, {"email": email.strip(), "terms": bool(terms)})
        except OSError as e:
            raise StorageError("Could not save draft", detail=str(e)) from e

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError("Could not remove draft", detail=str(e)) from e
