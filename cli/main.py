"""Content verifier CLI: entry-point for verification and text helpers.

Usage:
    python cli/main.py --help

Command groups:
    verify  → fetch links and keep the relevant ones
    text    → URL / Slack link / tweet ID extraction and date validation
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from content_verifier.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.commands.text import text_app
from cli.commands.verify import verify_app

app = typer.Typer(
    name="content-verifier",
    help="Content verifier CLI.",
    no_args_is_help=True,
)

app.add_typer(verify_app, name="verify")
app.add_typer(text_app, name="text")


if __name__ == "__main__":
    app()
