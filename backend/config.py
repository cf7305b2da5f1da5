"""Centralised settings for the blog summariser backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Workspace / storage
    # ------------------------------------------------------------------
    workspace_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("SUMMARISER_WORKSPACE", Path.home() / ".blog_summariser")
        )
    )

    @property
    def db_path(self) -> Path:
        """Absolute path to the SQLite summaries database."""
        return self.workspace_dir / "summaries.db"

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10.0"))
    )
    relay_url: str = field(default_factory=lambda: os.environ.get("RELAY_URL", ""))
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko)",
        )
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    min_content_length: int = field(
        default_factory=lambda: int(os.environ.get("MIN_CONTENT_LENGTH", "50"))
    )
    summary_sentences: int = field(
        default_factory=lambda: int(os.environ.get("SUMMARY_SENTENCES", "3"))
    )

    # ------------------------------------------------------------------
    # Document store (MongoDB)
    # ------------------------------------------------------------------
    mongodb_uri: str = field(default_factory=lambda: os.environ.get("MONGODB_URI", ""))
    mongodb_database: str = field(
        default_factory=lambda: os.environ.get("MONGODB_DATABASE", "blog_data")
    )
    mongodb_collection: str = field(
        default_factory=lambda: os.environ.get("MONGODB_COLLECTION", "blogs")
    )
    mongodb_timeout_ms: int = field(
        default_factory=lambda: int(os.environ.get("MONGODB_TIMEOUT_MS", "1500"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    log_dir: str = field(default_factory=lambda: os.environ.get("LOG_DIR", ""))

    def ensure_workspace(self) -> None:
        """Create the workspace directory if it does not exist."""
        self.workspace_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton — import this everywhere:
#   from backend.config import settings
settings = Settings()
