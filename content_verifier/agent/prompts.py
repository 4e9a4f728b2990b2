"""Prompt constants for the relevancy classifier.

These are process-wide and never mutated; pass a different prompt to the
classifier or node factory instead of editing them.
"""

from __future__ import annotations

LANGCHAIN_PRODUCTS_CONTEXT = """\
- LangChain: the open-source framework (Python and JavaScript) for building \
LLM applications. Look for imports or usage of `langchain`, `langchain_core`, \
`langchain_community` or partner packages such as `langchain_openai` and \
`langchain_anthropic`, or of LangChain concepts like chains, retrievers, \
document loaders, tools and chat model integrations.
- LangGraph: the library for building stateful, multi-actor agents as graphs. \
Look for `StateGraph`, nodes and edges, checkpointers, human-in-the-loop \
interrupts, LangGraph Platform / LangGraph Cloud deployments or LangGraph Studio.
- LangSmith: the platform for tracing, evaluating and monitoring LLM \
applications. Look for tracing setup, datasets, evaluators, prompt hub usage \
or references to the LangSmith UI and SDK."""


def build_relevancy_prompt(products_context: str = LANGCHAIN_PRODUCTS_CONTEXT) -> str:
    """Render the classifier's system prompt around *products_context*."""
    return f"""You are a highly regarded marketing employee at LangChain.
You're provided with a webpage containing content a third party submitted to LangChain claiming it's relevant and implements LangChain's products.
Your task is to carefully read over the entire page, and determine whether or not the content actually implements and is relevant to LangChain's products.
You're doing this to ensure the content is relevant to LangChain, and it can be used as marketing material to promote LangChain.

For context, LangChain has three main products you should be looking out for:
{products_context}

Given this context, examine the webpage content closely, and determine if the content implements LangChain's products.
You should provide reasoning as to why or why not the content implements LangChain's products, then a simple true or false for whether or not it implements some."""


VERIFY_RELEVANT_CONTENT_PROMPT = build_relevancy_prompt()
