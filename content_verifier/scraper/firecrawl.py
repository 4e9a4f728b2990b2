"""Firecrawl scrape backend exposed as a LangChain document loader.

Talks to the Firecrawl REST API directly with ``httpx``.  The loader never
raises for a failed or empty scrape: it yields no documents and the caller
moves on to its fallback.
"""

from __future__ import annotations

from typing import Iterator

import httpx
from langchain_core.document_loaders import BaseLoader
from langchain_core.documents import Document

from content_verifier.config import settings

_SUPPORTED_MODES = ("scrape",)


class FirecrawlLoader(BaseLoader):
    """Load a single URL through Firecrawl's ``/v1/scrape`` endpoint.

    Args:
        url: Page to scrape.
        mode: Only ``"scrape"`` (single page) is supported.
        api_key: Overrides ``settings.firecrawl_api_key``.
        api_url: Overrides ``settings.firecrawl_api_url``.
    """

    def __init__(
        self,
        url: str,
        mode: str = "scrape",
        api_key: str | None = None,
        api_url: str | None = None,
    ) -> None:
        if mode not in _SUPPORTED_MODES:
            raise ValueError(
                f"Unsupported Firecrawl mode {mode!r}; expected one of {_SUPPORTED_MODES}."
            )
        self.url = url
        self.mode = mode
        self.api_key = settings.firecrawl_api_key if api_key is None else api_key
        self.api_url = (api_url or settings.firecrawl_api_url).rstrip("/")

    def _scrape(self) -> dict:
        with httpx.Client(timeout=settings.request_timeout) as client:
            resp = client.post(
                f"{self.api_url}/v1/scrape",
                json={"url": self.url, "formats": ["markdown"]},
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
            resp.raise_for_status()
            return resp.json()

    def lazy_load(self) -> Iterator[Document]:
        if not self.api_key:
            print("[Firecrawl] no FIRECRAWL_API_KEY configured; skipping.")
            return

        try:
            payload = self._scrape()
        except (httpx.HTTPError, ValueError) as exc:
            print(f"[Firecrawl] scrape failed for {self.url}: {exc!r:.120}")
            return

        if not payload.get("success", True):
            print(f"[Firecrawl] scrape unsuccessful for {self.url}: {payload.get('error')}")
            return

        data = payload.get("data") or {}
        markdown = data.get("markdown") or ""
        if not markdown.strip():
            return

        metadata = dict(data.get("metadata") or {})
        metadata.setdefault("sourceURL", self.url)
        yield Document(page_content=markdown, metadata=metadata)
