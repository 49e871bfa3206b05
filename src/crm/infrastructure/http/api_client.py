"""Thin JSON-over-HTTP client for the CRM API routes.

One request per call: no retry, backoff or deduplication. Every
authorised request carries ``Authorization: Bearer <token>``.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    """The API answered with an error status, or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail  # the server's own "error" text, if any


class ApiClient:

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._session = session or requests.Session()
        logger.debug("ApiClient initialized with base_url=%s timeout=%s", self.base_url, self.timeout)

    def get(self, path: str) -> Any:
        return self.request_json("GET", path)

    def post(self, path: str, body: dict[str, Any]) -> Any:
        return self.request_json("POST", path, body)

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        return self.request_json("PATCH", path, body)

    def request_json(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        url = self.base_url + path
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(
                method, url, json=body, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(f"Network error: {e}") from e

        if not resp.ok:
            detail = self._error_detail(resp)
            message = detail or f"HTTP {resp.status_code} from API"
            logger.warning("%s %s returned %s: %s", method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code, detail=detail)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {method} {path}", status_code=resp.status_code) from e

    @staticmethod
    def _error_detail(resp: requests.Response) -> str | None:
        """Return the server's ``{"error": ...}`` message, if it sent one."""
        try:
            data = resp.json()
        except ValueError:
            return None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return None
