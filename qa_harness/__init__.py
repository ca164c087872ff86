"""
Playwright QA harness package.

Wires together configuration, logging, and the thread-isolated browser
session manager used by the page objects and the test suites.
"""

import logging

from config import get_config

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_config().LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
)

from qa_harness.exceptions import HarnessError, InitializationError  # noqa: E402
from qa_harness.session import (  # noqa: E402
    Session,
    SessionManager,
    SessionState,
)

__all__ = [
    "HarnessError",
    "InitializationError",
    "Session",
    "SessionManager",
    "SessionState",
]
