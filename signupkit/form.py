"""
signupkit.form

SignupForm is the front-end independent state of the signup page: field
values, the unsaved-changes flag, validation and the simulated submit.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from .availability import EmailCheck
from .drafts import DraftStore
from .errors import SignupValidationError
from .strength import evaluate, StrengthReport
from .validation import validate_form, is_form_valid

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Account created successfully"
DEFAULT_SUBMIT_DELAY = 0.8


class SignupForm:
    def __init__(self, drafts: Optional[DraftStore] = None):
        self.drafts = drafts
        self.email = ""
        self.password = ""
        self.confirm = ""
        self.terms = False
        self.dirty = False
        self.email_check = EmailCheck()

    # ---- field edits ----
    def set_email(self, value: str) -> Optional[int]:
        """Returns the availability ticket for the new value (None when blank)."""
        self.email = value
        self.dirty = True
        ticket = self.email_check.request(value)
        self._save_draft()
        return ticket

    def set_password(self, value: str) -> None:
        self.password = value
        self.dirty = True

    def set_confirm(self, value: str) -> None:
        self.confirm = value
        self.dirty = True

    def set_terms(self, checked: bool) -> None:
        self.terms = bool(checked)
        self.dirty = True
        self._save_draft()

    # ---- drafts ----
    def draft(self) -> Dict[str, Any]:
        return {"email": self.email.strip(), "terms": self.terms}

    def restore(self, draft: Optional[Dict[str, Any]] = None) -> None:
        """Apply a saved draft (or the store's) without marking the form dirty."""
        if draft is None and self.drafts is not None:
            draft = self.drafts.load()
        if not draft:
            return
        if isinstance(draft.get("email"), str):
            self.email = draft["email"]
        if isinstance(draft.get("terms"), bool):
            self.terms = draft["terms"]

    def _save_draft(self) -> None:
        if self.drafts is not None:
            self.drafts.save(self.email, self.terms)

    # ---- evaluation ----
    def strength(self) -> StrengthReport:
        return evaluate(self.password)

    def validate(self) -> Dict[str, str]:
        return validate_form(self.email, self.password, self.confirm, self.terms)

    def is_valid(self) -> bool:
        return is_form_valid(self.validate())

    def reset(self) -> None:
        self.email = ""
        self.email_check.request("")
        self.password = ""
        self.confirm = ""
        self.terms = False
        self.dirty = False

    def check(self) -> None:
        """Raise SignupValidationError unless every field is valid."""
        errors = self.validate()
        if not is_form_valid(errors):
            raise SignupValidationError(errors)

    def complete(self) -> Dict[str, Any]:
        """Finish an accepted signup: clear the fields and the stored draft."""
        email = self.email.strip()
        self.reset()
        if self.drafts is not None:
            self.drafts.clear()
        logger.info("signup accepted for %s", email)
        return {"ok": True, "email": email, "message": SUCCESS_MESSAGE}

    async def submit(self, delay: float = DEFAULT_SUBMIT_DELAY) -> Dict[str, Any]:
        self.check()
        # stands in for the account creation round trip
        await asyncio.sleep(delay)
        return self.complete()
