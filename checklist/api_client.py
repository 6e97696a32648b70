# checklist/api_client.py
"""
HTTP client for the checklist backend.

Three calls, one per endpoint:
  - get_response(response_id)        -> dict   (raw JSON body)
  - get_response_pdf(response_id)    -> bytes  (binary PDF)
  - request_access(email, message)   -> dict   (raw JSON body, {"success": bool})

Every transport problem, non-2xx status or undecodable JSON body is raised as
ChecklistAPIError so callers only have one failure type to handle.
"""

import logging

import requests

from checklist import config

logger = logging.getLogger(__name__)


class ChecklistAPIError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ChecklistAPIError):
    """The requested response id does not exist."""


class ChecklistClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None, session=None):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout  = timeout if timeout is not None else config.API_TIMEOUT
        self.session  = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ChecklistAPIError(f"{method} {path} failed: {e}") from e

        if resp.status_code == 404:
            raise NotFoundError(f"{method} {path} returned 404", status_code=404)
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise ChecklistAPIError(f"{method} {path} returned {resp.status_code}",
                                    status_code=resp.status_code) from e
        logger.debug("API_OK method=%s path=%s status=%s", method, path, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: requests.Response):
        try:
            return resp.json()
        except ValueError as e:
            raise ChecklistAPIError(f"response body is not JSON: {e}",
                                    status_code=resp.status_code) from e

    # ── Public API ────────────────────────────────────────────────────────────

    def get_response(self, response_id: str) -> dict:
        resp = self._send("GET", f"/api/responses/{response_id}")
        return self._json(resp)

    def get_response_pdf(self, response_id: str) -> bytes:
        resp = self._send("GET", f"/api/responses/{response_id}/pdf")
        return resp.content

    def request_access(self, email: str, message: str) -> dict:
        resp = self._send("POST", "/api/responses/access-request",
                          json={"email": email, "message": message})
        return self._json(resp)
