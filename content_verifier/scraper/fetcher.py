"""HTML retrieval for the plain-text fallback fetch.

Static HTML comes from ``httpx``.  Pages whose static HTML carries almost no
readable text but looks like a JavaScript app are re-rendered in headless
Chromium when the optional ``browser`` extra (Playwright) is installed;
otherwise the static HTML is used as is.
"""

from __future__ import annotations

import re

import httpx

from content_verifier.config import settings

# Mount points and bootstrap markers of client-rendered apps.
_APP_SHELL_PATTERNS = [
    re.compile(r'<div[^>]+id=["\'](?:root|app|__next)["\']', re.IGNORECASE),
    re.compile(r"window\.__NEXT_DATA__", re.IGNORECASE),
    re.compile(r"ng-version=", re.IGNORECASE),
    re.compile(r"data-reactroot", re.IGNORECASE),
]
_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)[^>]*>.*?</(script|style)>", re.IGNORECASE | re.DOTALL
)
_TAG_RE = re.compile(r"<[^>]+>")

# Below this many visible characters the static HTML is treated as a shell.
_MIN_STATIC_TEXT = 200

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; ContentVerifier/1.0; +https://github.com/content-verifier)"
    )
}


def _visible_text_length(html: str) -> int:
    return len(_TAG_RE.sub("", _SCRIPT_STYLE_RE.sub("", html)).strip())


def _needs_rendering(html: str) -> bool:
    """Return ``True`` when *html* is an app shell with too little text to classify.

    Server-rendered pages (including Next.js ones) that already contain
    their text are left alone.
    """
    if _visible_text_length(html) >= _MIN_STATIC_TEXT:
        return False
    return len(html) > 2000 or any(p.search(html) for p in _APP_SHELL_PATTERNS)


def _render_with_playwright(url: str) -> str | None:
    """Return the rendered HTML of *url*, or ``None`` if it cannot be rendered.

    Playwright is optional: a missing install and browser/navigation errors
    both fall back to the static HTML.
    """
    try:
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415
        from playwright.sync_api import sync_playwright  # noqa: PLC0415
    except ImportError:
        print(f"[page text] Playwright not installed; using static HTML for {url}.")
        return None

    try:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(headless=True)
            try:
                page = browser.new_page()
                page.goto(
                    url,
                    timeout=int(settings.request_timeout * 1000),
                    wait_until="networkidle",
                )
                return page.content()
            finally:
                browser.close()
    except PlaywrightError as exc:
        print(f"[page text] Playwright render failed for {url}: {exc!r:.120}")
        return None


def fetch_html(url: str) -> str:
    """Return the HTML of *url*, rendered in a browser when the static page is a shell.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.RequestError: On connection failures and timeouts.
    """
    with httpx.Client(
        headers=_DEFAULT_HEADERS,
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text

    if _needs_rendering(html):
        print(f"[page text] {url} looks client-rendered; rendering with Playwright …")
        rendered = _render_with_playwright(url)
        if rendered:
            return rendered

    return html
