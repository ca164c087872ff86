"""Shared live-site helpers for the e2e and API test suites."""

from __future__ import annotations

import logging
import os
import time

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when ``url`` answers with a non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_site(url: str, timeout: int = 15, interval: int = 1) -> bool:
    """Poll ``url`` until it is reachable or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            return True
        time.sleep(interval)
    return False


def live_site_url(*, base_url_env: str, base_url_default: str, suite_name: str) -> str:
    """
    Return a reachable base URL for a live suite, or skip the suite.

    Priority:
    1. Use the explicit URL from ``base_url_env``.
    2. Fall back to ``base_url_default`` (usually from the config class).
    """
    base_url = (os.getenv(base_url_env) or base_url_default).rstrip("/")
    if not wait_for_site(base_url):
        logger.warning("%s suite skipped: %s is unreachable", suite_name, base_url)
        pytest.skip(f"{base_url} is unreachable; set {base_url_env} to run {suite_name} tests")
    return base_url
