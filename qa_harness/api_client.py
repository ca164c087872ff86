"""
Fluent REST client for API tests.

``APIClient`` is a thin builder over ``requests.Session``: headers, body,
path and query parameters are collected with chainable methods, and a
terminal HTTP method sends the request and returns the raw
``requests.Response`` for the test to assert on.

Transient failures (connection errors, 429 and 5xx responses) on idempotent
methods are retried by urllib3 with exponential backoff; nothing else about
the response is interpreted here.

Example:
    response = (
        APIClient()
        .add_path_param("id", 1)
        .add_query_param("_embed", "comments")
        .get("/posts/{id}")
    )
    assert response.status_code == 200
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import Config, get_config

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def build_session(max_retries: int) -> requests.Session:
    """Create a session with a retrying adapter mounted for http and https."""
    session = requests.Session()
    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=0.5,
        status_forcelist=RETRY_STATUS_CODES,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class APIClient:
    """
    Chainable request builder.

    Args:
        base_url: API root; defaults to ``config.API_BASE_URL``.
        config: Configuration class; defaults to ``get_config()``.
        session: Pre-built ``requests.Session``; one with retries is
            created when omitted.
    """

    def __init__(
        self,
        base_url: str | None = None,
        config: type[Config] | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or get_config()
        self.base_url = (base_url or self.config.API_BASE_URL).rstrip("/")
        self.timeout = self.config.API_TIMEOUT_MS / 1000
        self.session = session or build_session(self.config.API_MAX_RETRIES)
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self.path_params: dict[str, Any] = {}
        self.query_params: dict[str, Any] = {}
        self.body: Any = None

    # -------------------------------------------------------------------------
    # Builder Methods
    # -------------------------------------------------------------------------

    def add_header(self, key: str, value: str) -> "APIClient":
        self.headers[key] = value
        logger.debug("Added header: %s", key)
        return self

    def add_headers(self, headers: dict[str, str]) -> "APIClient":
        self.headers.update(headers)
        logger.debug("Added %s headers", len(headers))
        return self

    def set_body(self, body: Any) -> "APIClient":
        """Set a JSON-serialisable request body."""
        self.body = body
        logger.debug("Request body set")
        return self

    def add_path_param(self, key: str, value: Any) -> "APIClient":
        """Substitute ``{key}`` in the endpoint with ``value``."""
        self.path_params[key] = value
        logger.debug("Added path param: %s=%s", key, value)
        return self

    def add_query_param(self, key: str, value: Any) -> "APIClient":
        self.query_params[key] = value
        logger.debug("Added query param: %s=%s", key, value)
        return self

    # -------------------------------------------------------------------------
    # Terminal HTTP Methods
    # -------------------------------------------------------------------------

    def get(self, endpoint: str) -> requests.Response:
        return self._send("GET", endpoint)

    def post(self, endpoint: str) -> requests.Response:
        return self._send("POST", endpoint)

    def put(self, endpoint: str) -> requests.Response:
        return self._send("PUT", endpoint)

    def patch(self, endpoint: str) -> requests.Response:
        return self._send("PATCH", endpoint)

    def delete(self, endpoint: str) -> requests.Response:
        return self._send("DELETE", endpoint)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def build_url(self, endpoint: str) -> str:
        """
        Resolve path parameters and join ``endpoint`` onto the base URL.

        Raises:
            ValueError: If the endpoint names a placeholder with no value.
        """

        def _substitute(match: re.Match) -> str:
            key = match.group(1)
            if key not in self.path_params:
                raise ValueError(f"No value for path parameter '{key}' in {endpoint}")
            return str(self.path_params[key])

        path = _PLACEHOLDER.sub(_substitute, endpoint)
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, endpoint: str) -> requests.Response:
        url = self.build_url(endpoint)
        logger.info("%s %s", method, endpoint)
        response = self.session.request(
            method,
            url,
            headers=self.headers,
            params=self.query_params or None,
            json=self.body,
            timeout=self.timeout,
        )
        self._log_response(response)
        return response

    @staticmethod
    def _log_response(response: requests.Response) -> None:
        logger.info("Response status: %s", response.status_code)
        logger.debug("Response body: %s", response.text)
