# checklist/access_request.py
"""
Lead-capture modal for the free academy access code.

  CLOSED ──open()──▶ OPEN ──submit()──▶ SUBMITTING ──▶ CLOSED  (success)
                      ▲                                  │
                      └───────────── failure ────────────┘

open() seeds the email from the session value (if any) and always clears the
message. submit() is refused unless the email is non-empty and nothing is
already in flight. A reply without "success": true counts as a failure and
keeps the modal open with the draft intact. cancel() drops the draft.
"""

import logging

from checklist.api_client import ChecklistAPIError
from checklist.messages import Notice

logger = logging.getLogger(__name__)

CLOSED     = "closed"
OPEN       = "open"
SUBMITTING = "submitting"


class AccessRequestWorkflow:
    def __init__(self, client, read_session_value, email_key: str = "userEmail"):
        self.client = client
        self.read_session_value = read_session_value
        self.email_key = email_key
        self.status = CLOSED
        self.email = ""
        self.message = ""
        self.notice = None
        self.detached = False

    @property
    def is_open(self) -> bool:
        return self.status != CLOSED

    @property
    def submitting(self) -> bool:
        return self.status == SUBMITTING

    @property
    def can_submit(self) -> bool:
        return self.status == OPEN and bool(self.email)

    def open(self):
        if self.status == SUBMITTING:
            return
        self.email = self.read_session_value(self.email_key) or ""
        self.message = ""
        self.status = OPEN

    def cancel(self):
        if self.status == SUBMITTING:
            return
        self.status = CLOSED
        self.email = ""
        self.message = ""

    def set_email(self, value: str):
        if self.status == OPEN:
            self.email = value or ""

    def set_message(self, value: str):
        if self.status == OPEN:
            self.message = value or ""

    def detach(self):
        """The view is gone; a submission still outstanding must not write back."""
        self.detached = True

    def submit(self) -> bool:
        """Returns True when the request was accepted."""
        if not self.can_submit:
            logger.debug("ACCESS_REQUEST_REFUSED status=%s email_present=%s", self.status, bool(self.email))
            return False

        self.status = SUBMITTING
        self.notice = None
        try:
            body = self.client.request_access(self.email, self.message)
            ok = isinstance(body, dict) and body.get("success") is True
            if not ok:
                logger.warning("ACCESS_REQUEST_REJECTED body=%r", body)
        except ChecklistAPIError:
            logger.exception("ACCESS_REQUEST_FAILED")
            ok = False

        if self.detached:
            logger.info("ACCESS_REQUEST_STALE success=%s", ok)
            return False

        if ok:
            logger.info("ACCESS_REQUEST_SENT")
            self.status = CLOSED
            self.email = ""
            self.message = ""
            self.notice = Notice("success", "access_sent")
            return True

        self.status = OPEN
        self.notice = Notice("error", "access_failed")
        return False
