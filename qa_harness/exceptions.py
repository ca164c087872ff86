"""Exceptions raised by the harness."""

from __future__ import annotations


class HarnessError(Exception):
    """Base class for harness errors."""


class InitializationError(HarnessError):
    """
    The browser engine could not be launched.

    Fatal for the current scenario and never retried by the harness;
    the original driver error is available as ``__cause__``.
    """

    def __init__(self, browser_type: str, message: str = "Browser initialization failed"):
        super().__init__(f"{message} ({browser_type})")
        self.browser_type = browser_type
