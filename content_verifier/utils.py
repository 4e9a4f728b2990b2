"""Pure text helpers used across the content pipeline.

URL, Slack-link and tweet-ID extraction plus validation of the
``M/D/YYYY h:mm AM|PM TZ`` date strings that schedule posts.  Nothing here
performs I/O.  A no-match is an ordinary outcome: extractors return ``[]`` or
``None`` and the validator returns ``False``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

# ---------------------------------------------------------------------------
# URL extraction
# ---------------------------------------------------------------------------

# Stops at whitespace and at the characters Slack uses for link markup.
_URL_RE = re.compile(r"https?://[^\s<>|\"]+")
_ABSOLUTE_URL_RE = re.compile(r"https?://\S+")
_SLACK_LINK_RE = re.compile(r"<([^<>]+)>")
_TWEET_ID_RE = re.compile(r"/status(?:es)?/(\d+)")


def extract_urls(text: str) -> list[str]:
    """Return every ``http(s)`` URL in *text*, left to right, duplicates kept."""
    return _URL_RE.findall(text)


def extract_urls_from_slack_text(text: str) -> list[str]:
    """Return the URLs from Slack ``<url>`` / ``<url|label>`` markup.

    Each bracketed span contributes its first URL-shaped part, so a label
    placed before the pipe (``<label|url>``) is skipped too.  Spans without a
    URL, such as ``<@U123>`` mentions, are ignored, as are bare URLs outside
    brackets.
    """
    urls: list[str] = []
    for span in _SLACK_LINK_RE.findall(text):
        for part in span.split("|"):
            part = part.strip()
            if _ABSOLUTE_URL_RE.fullmatch(part):
                urls.append(part)
                break
    return urls


def extract_tweet_id(url: str) -> str | None:
    """Return the numeric status ID in a tweet *url*, or ``None``.

    >>> extract_tweet_id("https://twitter.com/user/status/1422656689476354560?s=20")
    '1422656689476354560'
    """
    match = _TWEET_ID_RE.search(url)
    return match.group(1) if match else None


# ---------------------------------------------------------------------------
# Date strings
# ---------------------------------------------------------------------------

# Fixed offsets per abbreviation.  The abbreviation already says whether
# daylight time applies, so no timezone database lookup is done.
TIMEZONE_OFFSETS: dict[str, int] = {
    "PST": -8,
    "PDT": -7,
    "MST": -7,
    "MDT": -6,
    "CST": -6,
    "CDT": -5,
    "EST": -5,
    "EDT": -4,
}

_DATE_RE = re.compile(
    r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4}) "
    r"(?P<hour>\d{1,2}):(?P<minute>\d{2}) (?P<period>AM|PM) (?P<tz>[A-Z]{3})"
)


def _parse(text: str) -> datetime | None:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None

    offset = TIMEZONE_OFFSETS.get(match["tz"])
    if offset is None:
        return None

    hour = int(match["hour"])
    minute = int(match["minute"])
    if not 1 <= hour <= 12 or minute > 59:
        return None
    if match["period"] == "AM":
        hour = 0 if hour == 12 else hour
    elif hour != 12:
        hour += 12

    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            hour,
            minute,
            tzinfo=timezone(timedelta(hours=offset), match["tz"]),
        )
    except ValueError:
        # Out-of-range month/day, e.g. 2/30/2024.
        return None


def is_valid_date_string(text: str) -> bool:
    """Return ``True`` for strings like ``"12/9/2024 06:15 PM PST"``."""
    return _parse(text) is not None


def get_date_from_timezone_date_string(text: str) -> datetime:
    """Parse a ``M/D/YYYY h:mm AM|PM TZ`` string into an aware ``datetime``.

    Raises:
        ValueError: If :func:`is_valid_date_string` would reject *text*.
    """
    parsed = _parse(text)
    if parsed is None:
        raise ValueError(f"Invalid date string: {text!r}")
    return parsed
