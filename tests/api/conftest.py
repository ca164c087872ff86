"""
Fixtures for the live REST API suite.

Each test gets a fresh ``APIClient`` so builder state (headers, params,
body) never leaks between tests. Request bodies live as JSON files under
``tests/api/fixtures``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from config import Config, get_config
from qa_harness.api_client import APIClient
from shared.live_site import live_site_url

logger = logging.getLogger(__name__)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def harness_config() -> type[Config]:
    return get_config()


@pytest.fixture(scope="session")
def api_base_url(harness_config: type[Config]) -> str:
    return live_site_url(
        base_url_env="API_BASE_URL",
        base_url_default=harness_config.API_BASE_URL,
        suite_name="api",
    )


@pytest.fixture
def api_client(api_base_url: str, harness_config: type[Config]) -> APIClient:
    return APIClient(base_url=api_base_url, config=harness_config)


@pytest.fixture
def load_fixture() -> Callable[[str], dict[str, Any]]:
    """Factory that loads ``tests/api/fixtures/<name>.json``."""

    def _load(name: str) -> dict[str, Any]:
        path = FIXTURES_DIR / f"{name}.json"
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to load fixture: %s", name)
            raise RuntimeError(f"Cannot load fixture: {name}") from exc

    return _load
