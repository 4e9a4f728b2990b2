"""Commands wrapping the pure text helpers (URLs, tweet IDs, date strings)."""

from __future__ import annotations

import typer

from content_verifier.utils import (
    extract_tweet_id,
    extract_urls,
    extract_urls_from_slack_text,
    get_date_from_timezone_date_string,
    is_valid_date_string,
)

text_app = typer.Typer(help="Extract links and validate dates in free text.")


@text_app.command("urls")
def text_urls(
    text: str = typer.Argument(..., help="Text to scan."),
    slack: bool = typer.Option(
        False, "--slack", help="Only read Slack <url|label> markup."
    ),
) -> None:
    """Print every URL found in TEXT, one per line."""
    urls = extract_urls_from_slack_text(text) if slack else extract_urls(text)
    if not urls:
        typer.echo("[text urls] No URLs found.")
        return
    for url in urls:
        typer.echo(url)


@text_app.command("tweet-id")
def text_tweet_id(url: str = typer.Argument(..., help="Tweet URL.")) -> None:
    """Print the status ID of a tweet URL."""
    tweet_id = extract_tweet_id(url)
    if tweet_id is None:
        typer.echo(f"[text tweet-id] No tweet ID in {url!r}.", err=True)
        raise typer.Exit(code=1)
    typer.echo(tweet_id)


@text_app.command("date")
def text_date(
    text: str = typer.Argument(..., help='Date string, e.g. "12/9/2024 06:15 PM PST".'),
) -> None:
    """Validate a scheduling date string and print it as ISO-8601."""
    if not is_valid_date_string(text):
        typer.echo(f"[text date] Invalid date string: {text!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(get_date_from_timezone_date_string(text).isoformat())
