"""State schemas shared by the verification node, graph and runner."""

from __future__ import annotations

import operator
from typing import Annotated, TypedDict


class VerificationRequest(TypedDict):
    """Input for verifying one candidate URL."""

    link: str


class VerificationResult(TypedDict):
    """Positionally parallel lists; both empty or both holding one entry per link."""

    relevant_links: list[str]
    page_contents: list[str]


class VerifyContentState(TypedDict):
    """Graph state: the link under verification plus the accumulated results.

    The list channels concatenate updates, which is how a calling graph
    merges results from several verified links.
    """

    link: str
    relevant_links: Annotated[list[str], operator.add]
    page_contents: Annotated[list[str], operator.add]
