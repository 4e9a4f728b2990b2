"""LangGraph node functions for general-content verification.

``make_verify_general_content`` is a *factory*: it captures the relevancy
model and system prompt in a closure and returns a callable
``(VerifyContentState, config) -> VerificationResult`` suitable for use as a
LangGraph node.  Keeping that configuration in the closure keeps it out of
the state bag, and lets tests inject a fake model.

Pipeline for one link::

    get_url_contents (Firecrawl → plain-text fallback)
        → verify_general_content_is_relevant (structured LLM judgment)
        → {relevant_links, page_contents}
"""

from __future__ import annotations

from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.runnables import RunnableConfig, RunnableLambda
from pydantic import ValidationError

from content_verifier.agent.prompts import VERIFY_RELEVANT_CONTENT_PROMPT
from content_verifier.agent.schemas import RelevancyJudgment
from content_verifier.agent.state import VerificationResult, VerifyContentState
from content_verifier.config import settings
from content_verifier.exceptions import ClassificationFailed, FetchFailed
from content_verifier.scraper.firecrawl import FirecrawlLoader
from content_verifier.scraper.page_text import get_page_text


# ---------------------------------------------------------------------------
# LLM helper
# ---------------------------------------------------------------------------

def _get_llm() -> BaseChatModel:
    """Return a deterministic LangChain chat model based on ``settings``."""
    if settings.llm_provider == "anthropic":
        from langchain_anthropic import ChatAnthropic

        return ChatAnthropic(model=settings.anthropic_chat_model, temperature=0)

    if settings.llm_provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(model=settings.openai_chat_model, temperature=0)

    from langchain_ollama import ChatOllama

    return ChatOllama(model=settings.ollama_chat_model, temperature=0)


# ---------------------------------------------------------------------------
# Content fetcher
# ---------------------------------------------------------------------------

def get_url_contents(url: str) -> str:
    """Return the text of *url*, trying Firecrawl first and plain HTTP second.

    Raises:
        FetchFailed: If both strategies come back empty.
    """
    print(f"[FETCHING] {url}")
    docs = FirecrawlLoader(url, mode="scrape").load()
    docs_text = "\n".join(doc.page_content for doc in docs)
    if docs_text:
        return docs_text

    print(f"[FETCHING] Firecrawl returned nothing for {url}; falling back to plain fetch.")
    text = get_page_text(url)
    if text:
        return text

    raise FetchFailed(url)


# ---------------------------------------------------------------------------
# Relevance classifier
# ---------------------------------------------------------------------------

def _coerce_judgment(result: Any) -> RelevancyJudgment:
    if result is None:
        raise ClassificationFailed("model returned no structured output")
    if isinstance(result, RelevancyJudgment):
        return result
    try:
        return RelevancyJudgment.model_validate(result)
    except ValidationError as exc:
        raise ClassificationFailed(exc) from exc


def verify_general_content_is_relevant(
    content: str,
    *,
    llm: BaseChatModel | None = None,
    system_prompt: str = VERIFY_RELEVANT_CONTENT_PROMPT,
    config: RunnableConfig | None = None,
) -> bool:
    """Ask the relevancy model whether *content* implements LangChain's products.

    Args:
        content: Page text, passed to the model verbatim.
        llm: Chat model to use; defaults to :func:`_get_llm`.
        system_prompt: Product-context instructions for the model.
        config: Parent run config, forwarded for tracing.

    Raises:
        ClassificationFailed: The model call failed or its response did not
            validate against :class:`RelevancyJudgment`.
    """
    messages = [SystemMessage(content=system_prompt), HumanMessage(content=content)]

    # Provider construction (missing integration, no structured-output
    # support) fails the link the same way a failed call does.
    try:
        model = (
            (llm if llm is not None else _get_llm())
            .with_structured_output(RelevancyJudgment)
            .with_config(run_name="check-general-relevancy-model")
        )
        result = model.invoke(messages, config)
    except Exception as exc:
        raise ClassificationFailed(exc) from exc

    judgment = _coerce_judgment(result)
    print(f"[VERIFYING] relevant={judgment.relevant}: {judgment.reasoning}")
    return judgment.relevant


# ---------------------------------------------------------------------------
# Node factory
# ---------------------------------------------------------------------------

def make_verify_general_content(
    llm: BaseChatModel | None = None,
    system_prompt: str = VERIFY_RELEVANT_CONTENT_PROMPT,
):
    """Return a *verify_general_content* node function.

    The node fetches the page for ``state["link"]`` and keeps it only when the
    relevancy model judges it relevant.  ``FetchFailed`` and
    ``ClassificationFailed`` propagate to the caller unchanged.
    """

    def verify_general_content(
        state: VerifyContentState,
        config: RunnableConfig | None = None,
    ) -> VerificationResult:
        link = state["link"]
        page_content = (
            RunnableLambda(get_url_contents)
            .with_config(run_name="get-url-contents")
            .invoke(link, config)
        )
        relevant = verify_general_content_is_relevant(
            page_content,
            llm=llm,
            system_prompt=system_prompt,
            config=config,
        )

        if relevant:
            print(f"[VERIFYING] ✓ {link}")
            return {"relevant_links": [link], "page_contents": [page_content]}

        print(f"[VERIFYING] ✗ {link} is not relevant.")
        return {"relevant_links": [], "page_contents": []}

    return verify_general_content


verify_general_content = make_verify_general_content()
