"""Blog summariser CLI — entry-point for the backend pipeline.

Usage:
    python cli/main.py --help

Commands:
    summarise   → fetch, summarise and gloss a page, then store it
    scrape      → fetch a page and print its extracted main text
    db init     → create the summaries table
    db history  → list recently stored summaries
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from backend.config import settings
from backend.db import get_connection, init_db
from backend.db.documents import get_document_collection, get_mongo_client
from backend.db.summaries import list_summaries
from backend.errors import InternalError, SummariseError
from backend.logging_setup import setup_logging
from backend.scraper import extract_content, fetch_url
from backend.summary.pipeline import build_pipeline

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="summariser",
    help="Blog summariser CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_dir or None)


# ---------------------------------------------------------------------------
# DB commands
# ---------------------------------------------------------------------------
db_app = typer.Typer(help="Database operations.", no_args_is_help=True)
app.add_typer(db_app, name="db")


@db_app.command("init")
def db_init() -> None:
    """Initialise the SQLite database (create tables if they do not exist)."""
    conn = get_connection()
    init_db(conn)
    conn.close()
    typer.echo(f"[db init] Database ready at {settings.db_path}")


@db_app.command("history")
def db_history(
    limit: int = typer.Option(20, "--limit", help="Number of summaries to show."),
) -> None:
    """List the most recently stored summaries."""
    conn = get_connection()
    init_db(conn)
    try:
        rows = list_summaries(conn, limit=limit)
    finally:
        conn.close()

    if not rows:
        typer.echo("[db history] No summaries stored yet.")
        return
    for row in rows:
        typer.echo(f"  {row['created_at']}  {row['url']}")
        typer.echo(f"      {row['summary']}")


# ---------------------------------------------------------------------------
# Pipeline commands
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="URL to scrape."),
) -> None:
    """Fetch a URL and print its extracted main text to stdout."""
    typer.echo(f"[scrape] Fetching {url!r} …")
    try:
        raw = fetch_url(url, relay_url=settings.relay_url or None)
    except SummariseError as e:
        typer.echo(f"❌ Error: {e.message}")
        raise typer.Exit(code=1)
    typer.echo(f"[scrape] HTTP {raw.status_code} — extracting content …")

    clean = extract_content(raw)
    typer.echo(f"[scrape] Title  : {clean.title or '(none)'}")
    typer.echo(f"[scrape] Words  : {clean.word_count}")
    typer.echo("")
    typer.echo(clean.text)


@app.command("summarise")
def summarise(
    url: str = typer.Option(..., help="URL of the blog post to summarise."),
    save: bool = typer.Option(True, "--save/--no-save", help="Store the result."),
) -> None:
    """Summarise a page and print the summary with its Urdu gloss."""
    conn = get_connection() if save else None
    mongo = get_mongo_client() if save else None
    if conn is not None:
        init_db(conn)

    try:
        pipeline = build_pipeline(conn, get_document_collection(mongo))
        record = pipeline.summarise(url)
    except SummariseError as e:
        typer.echo(f"❌ Error: {e.message}")
        raise typer.Exit(code=1)
    except Exception:
        logger.exception("Unhandled error while summarising %r", url)
        typer.echo(f"❌ Error: {InternalError().message}")
        raise typer.Exit(code=1)
    finally:
        if conn is not None:
            conn.close()
        if mongo is not None:
            mongo.close()

    typer.echo(f"[summarise] {record.title or url}")
    typer.echo("")
    typer.echo("Summary:")
    typer.echo(record.summary)
    typer.echo("")
    typer.echo("Urdu:")
    typer.echo(record.urdu)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
