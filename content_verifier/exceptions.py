"""Errors raised while verifying a single link.

Both are terminal for the link being verified: callers should treat them as
"this link could not be verified" rather than as a pipeline failure.
"""

from __future__ import annotations


class VerificationError(Exception):
    """Base class for per-link verification failures."""


class FetchFailed(VerificationError):
    """Neither the scrape backend nor the plain-text fetch returned content."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Failed to fetch content from {url}.")
        self.url = url


class ClassificationFailed(VerificationError):
    """The relevancy model errored or returned an unusable judgment."""

    def __init__(self, cause: BaseException | str) -> None:
        super().__init__(f"Relevancy classification failed: {cause}")
        self.cause = cause
