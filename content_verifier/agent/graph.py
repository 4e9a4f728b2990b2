"""Build and compile the content-verification StateGraph.

The graph topology is:

    START → verify_general_content → END

The node is created by ``make_verify_general_content`` so the relevancy
model and prompt live in its closure rather than in the state bag.  The
``relevant_links`` / ``page_contents`` channels concatenate updates, so a
parent graph can fan several links into the same state.
"""

from __future__ import annotations

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from content_verifier.agent.nodes import make_verify_general_content
from content_verifier.agent.prompts import VERIFY_RELEVANT_CONTENT_PROMPT
from content_verifier.agent.state import VerifyContentState


def build_graph(
    llm: BaseChatModel | None = None,
    system_prompt: str = VERIFY_RELEVANT_CONTENT_PROMPT,
) -> CompiledStateGraph:
    """Compile and return the verification ``StateGraph``.

    Args:
        llm: Relevancy chat model; ``None`` resolves one from ``settings`` on
            each invocation.
        system_prompt: Product-context instructions for the model.

    Returns:
        A compiled LangGraph graph.  No checkpointer is attached: every
        invocation is independent.
    """
    graph = StateGraph(VerifyContentState)
    graph.add_node(
        "verify_general_content",
        make_verify_general_content(llm=llm, system_prompt=system_prompt),
    )
    graph.add_edge(START, "verify_general_content")
    graph.add_edge("verify_general_content", END)
    return graph.compile()
