"""Scraper package: Firecrawl scrape backend and plain-text fallback fetch."""

from content_verifier.scraper.extractor import extract_text
from content_verifier.scraper.fetcher import fetch_html
from content_verifier.scraper.firecrawl import FirecrawlLoader
from content_verifier.scraper.page_text import get_page_text

__all__ = [
    "FirecrawlLoader",
    "fetch_html",
    "extract_text",
    "get_page_text",
]
