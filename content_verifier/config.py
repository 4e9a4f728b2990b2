"""Centralised settings for the content verifier.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Provider credentials (``ANTHROPIC_API_KEY``, ``OPENAI_API_KEY``) are not
mirrored here; the LangChain integrations read them from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Relevancy model
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "anthropic")
    )
    anthropic_chat_model: str = field(
        default_factory=lambda: os.environ.get(
            "ANTHROPIC_CHAT_MODEL", "claude-3-5-sonnet-20241022"
        )
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )

    # ------------------------------------------------------------------
    # Scrape backend (Firecrawl)
    # ------------------------------------------------------------------
    firecrawl_api_key: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_KEY", "")
    )
    firecrawl_api_url: str = field(
        default_factory=lambda: os.environ.get(
            "FIRECRAWL_API_URL", "https://api.firecrawl.dev"
        )
    )

    # ------------------------------------------------------------------
    # Plain-text fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Batch verification
    # ------------------------------------------------------------------
    verify_max_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("VERIFY_MAX_CONCURRENCY", "3"))
    )


# Module-level singleton; import this everywhere:
#   from content_verifier.config import settings
settings = Settings()
