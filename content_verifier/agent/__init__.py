"""LangGraph content-verification agent package.

Public API::

    from content_verifier.agent import verify_link
    result = verify_link("https://example.com/langgraph-tutorial")
"""

from content_verifier.agent.graph import build_graph
from content_verifier.agent.nodes import (
    get_url_contents,
    make_verify_general_content,
    verify_general_content,
    verify_general_content_is_relevant,
)
from content_verifier.agent.runner import verify_link, verify_links

__all__ = [
    "build_graph",
    "get_url_contents",
    "make_verify_general_content",
    "verify_general_content",
    "verify_general_content_is_relevant",
    "verify_link",
    "verify_links",
]
