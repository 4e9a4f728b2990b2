"""High-level runners for the verification graph.

``verify_link`` verifies one URL and lets errors propagate.  ``verify_links``
verifies a batch concurrently, skipping links that cannot be verified, and
merges the per-link results the way a calling graph would: by concatenating
the parallel lists in input order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from langchain_core.runnables import RunnableConfig
from langgraph.graph.state import CompiledStateGraph

from content_verifier.agent.graph import build_graph
from content_verifier.agent.state import VerificationResult
from content_verifier.config import settings
from content_verifier.exceptions import VerificationError


def verify_link(
    link: str,
    config: RunnableConfig | None = None,
    graph: CompiledStateGraph | None = None,
) -> VerificationResult:
    """Run the verification graph for *link*.

    Args:
        link: Candidate URL.
        config: Optional LangGraph run configuration (callbacks, tags, …).
        graph: A compiled graph from :func:`build_graph`; built on demand
            when omitted.

    Raises:
        FetchFailed: No content could be fetched for *link*.
        ClassificationFailed: The relevancy model failed.
    """
    compiled = graph if graph is not None else build_graph()
    final = compiled.invoke({"link": link}, config=config)
    return {
        "relevant_links": list(final.get("relevant_links", [])),
        "page_contents": list(final.get("page_contents", [])),
    }


def verify_links(
    links: Iterable[str],
    max_workers: int | None = None,
    config: RunnableConfig | None = None,
) -> VerificationResult:
    """Verify every link in *links* concurrently and merge the results.

    Links whose verification raises a :class:`VerificationError` are logged
    and left out.  Any other exception propagates.
    """
    links = list(links)
    merged: VerificationResult = {"relevant_links": [], "page_contents": []}
    if not links:
        return merged

    graph = build_graph()
    workers = max_workers or settings.verify_max_concurrency

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(verify_link, link, config, graph) for link in links]
        # Iterate in submission order so the merged lists follow *links*.
        for link, future in zip(links, futures):
            try:
                result = future.result()
            except VerificationError as exc:
                print(f"[verify] ✗ Could not verify {link!r}: {exc}")
                continue
            merged["relevant_links"].extend(result["relevant_links"])
            merged["page_contents"].extend(result["page_contents"])

    print(
        f"[verify] {len(merged['relevant_links'])}/{len(links)} link(s) relevant."
    )
    return merged
