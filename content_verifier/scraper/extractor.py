"""Readable-text extraction from fetched HTML."""

from __future__ import annotations

import trafilatura
from bs4 import BeautifulSoup

# Elements that never hold article text.
_BOILERPLATE_TAGS = ["script", "style", "nav", "footer", "header", "noscript", "aside"]


def _soup_text(html: str) -> str:
    """Text of the ``<main>``/``<article>``/``<body>`` container, boilerplate removed."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_BOILERPLATE_TAGS):
        tag.decompose()
    container = soup.find("main") or soup.find("article") or soup.body or soup
    return container.get_text(separator=" ", strip=True)


def extract_text(html: str, url: str | None = None) -> str:
    """Return the readable text of *html*, or ``""`` when there is none.

    trafilatura handles article-like pages.  Short or unusual pages where it
    finds nothing go through a BeautifulSoup container heuristic instead.
    """
    text = trafilatura.extract(
        html,
        url=url,
        include_links=False,
        include_images=False,
        include_tables=True,
        no_fallback=False,
    )
    if not text:
        text = _soup_text(html)
    return (text or "").strip()
