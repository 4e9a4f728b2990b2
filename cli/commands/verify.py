"""Commands for verifying candidate links against LangChain's products."""

from __future__ import annotations

from typing import List

import typer

from content_verifier.agent.runner import verify_links

verify_app = typer.Typer(help="Verify that links are relevant marketing content.")


@verify_app.command("links")
def verify_links_command(
    urls: List[str] = typer.Argument(..., help="One or more URLs to verify."),
    show_content: bool = typer.Option(
        False, "--show-content", help="Print the fetched content of relevant pages."
    ),
    workers: int = typer.Option(
        0, "--workers", help="Concurrent verifications (0 = settings default)."
    ),
) -> None:
    """Fetch each URL and keep the ones the relevancy model accepts."""
    result = verify_links(urls, max_workers=workers or None)

    for link, content in zip(result["relevant_links"], result["page_contents"]):
        typer.echo(f"✅ {link}")
        if show_content:
            typer.echo(content)
            typer.echo("---")

    typer.echo(f"[verify] {len(result['relevant_links'])} of {len(urls)} link(s) relevant.")
