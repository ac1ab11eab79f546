from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode

import requests

from .errors import MusixmatchError, MusixmatchSyntaxError
from .logging_setup import redact_api_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApiResponse:
    status_code: int
    raw: Any

    def payload(self) -> Any:
        try:
            return self.raw.json()
        except ValueError as e:
            raise MusixmatchSyntaxError("Invalid JSON in response:", e) from e

    def body(self) -> Any:
        """
        Return ``message.body`` of the Musixmatch envelope.

        The envelope itself must be a JSON object; a missing body is ``None``.
        """
        data = self.payload()
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, dict):
            raise MusixmatchSyntaxError("Unexpected response envelope: missing 'message' object")
        return message.get("body")


class Transport:
    def __init__(self, *, base_url: str, timeout_s: float, session: requests.Session | None = None):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout_s = timeout_s
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def build_url(self, endpoint: str, params: Mapping[str, Any], api_key: str | None) -> str:
        query = urlencode(params)
        if api_key is not None:
            # key goes out verbatim, no percent-encoding
            query = f"{query}&apikey={api_key}" if query else f"apikey={api_key}"
        url = self.base_url + endpoint
        return f"{url}?{query}" if query else url

    def request(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, Any],
        *,
        api_key: str | None,
    ) -> ApiResponse:
        url = self.build_url(endpoint, params, api_key)
        logger.debug("%s %s %s", method, endpoint, dict(params))
        try:
            r = self.session.request(method, url, timeout=self.timeout_s)
        except requests.RequestException as e:
            reason = redact_api_key(str(e))
            if api_key:
                reason = reason.replace(api_key, "***")
            logger.warning("musixmatch %s %s failed: %s", method, endpoint, reason)
            raise MusixmatchError("Request to", endpoint, "failed:", reason) from e
        logger.debug("%s %s -> %s", method, endpoint, r.status_code)
        return ApiResponse(status_code=r.status_code, raw=r)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
