"""Plain-text fallback fetch: HTML retrieval plus readability extraction."""

from __future__ import annotations

import httpx

from content_verifier.scraper.extractor import extract_text
from content_verifier.scraper.fetcher import fetch_html


def get_page_text(url: str) -> str:
    """Return the readable text of *url*, or ``""`` if it cannot be fetched.

    HTTP and connection errors are logged and reported as "no content" so
    the caller can decide what an empty page means.
    """
    try:
        html = fetch_html(url)
    except httpx.HTTPError as exc:
        print(f"[page text] fetch failed for {url}: {exc}")
        return ""

    return extract_text(html, url=url)
