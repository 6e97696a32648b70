# checklist/view_state.py
"""
Primary record fetch.

ViewStateMachine
────────────────
  LOADING ──resolve()──▶ READY
     └─────fail()──────▶ ERROR
READY and ERROR are terminal for the current identifier. reset() (a new
identifier) is the only way back to LOADING.

ResponseLoader
──────────────
One GET per load(). Each call takes a fresh generation number; a result that
comes back after a newer load() (or after invalidate()) is stale and is
dropped instead of being written into the state machine.
"""

import logging

from checklist.api_client import ChecklistAPIError
from checklist.models import MalformedPayloadError, parse_response_data

logger = logging.getLogger(__name__)

LOADING = "loading"
READY   = "ready"
ERROR   = "error"

# message key, resolved by the page through checklist.messages
LOAD_FAILED = "load_failed"


class InvalidTransition(RuntimeError):
    pass


class ViewStateMachine:
    def __init__(self):
        self.status = LOADING
        self.data = None
        self.error = None

    @property
    def is_loading(self) -> bool:
        return self.status == LOADING

    @property
    def is_ready(self) -> bool:
        return self.status == READY

    @property
    def is_error(self) -> bool:
        return self.status == ERROR

    def reset(self):
        self.status = LOADING
        self.data = None
        self.error = None

    def resolve(self, data):
        if self.status != LOADING:
            raise InvalidTransition(f"cannot resolve from {self.status}")
        self.status = READY
        self.data = data

    def fail(self, message_key: str):
        if self.status != LOADING:
            raise InvalidTransition(f"cannot fail from {self.status}")
        self.status = ERROR
        self.error = message_key


class ResponseLoader:
    def __init__(self, client, state: ViewStateMachine | None = None):
        self.client = client
        self.state = state or ViewStateMachine()
        self.generation = 0

    def invalidate(self):
        """Mark any outstanding fetch as stale without touching the state."""
        self.generation += 1

    def load(self, response_id: str) -> bool:
        """
        Fetch and parse one record. Returns True if the outcome was applied,
        False if a newer load() or invalidate() superseded it.
        """
        self.generation += 1
        token = self.generation
        self.state.reset()

        try:
            body = self.client.get_response(response_id)
            data = parse_response_data(body)
        except (ChecklistAPIError, MalformedPayloadError):
            if token != self.generation:
                logger.info("RESPONSE_LOAD_STALE response_id=%s outcome=error", response_id)
                return False
            logger.exception("RESPONSE_LOAD_FAILED response_id=%s", response_id)
            self.state.fail(LOAD_FAILED)
            return True

        if token != self.generation:
            logger.info("RESPONSE_LOAD_STALE response_id=%s outcome=ready", response_id)
            return False
        self.state.resolve(data)
        logger.info("RESPONSE_LOADED response_id=%s answers=%d", response_id, len(data.answers))
        return True
