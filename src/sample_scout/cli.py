"""
Sample Scout CLI - Entry point

Runs the web backend and provides local admin utilities for the sound
catalogue (schema setup, adding sounds, ad-hoc searches).
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.table import Table

from sample_scout.core.config import load_config
from sample_scout.core.console import get_console
from sample_scout.core.database import get_db_connection, init_database
from sample_scout.core.output import log, setup_from_config

# Project root detection (where pyproject.toml and web/ live)
PROJECT_ROOT = Path(__file__).parent.parent.parent

LOCAL_USER_ID = "local"


def run_serve(host: Optional[str] = None, port: Optional[int] = None) -> int:
    """Run the FastAPI backend with uvicorn.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import uvicorn

    config = load_config()
    host = host or config.web.host
    port = port or config.web.port

    log(f"Starting Sample Scout API on http://{host}:{port}")
    uvicorn.run(
        "web.backend.main:app", host=host, port=port, app_dir=str(PROJECT_ROOT)
    )
    return 0


def run_init_db() -> int:
    """Create the database schema."""
    init_database()
    log("Database initialized")
    return 0


def run_search(
    query: str,
    bpm: Optional[str] = None,
    key: Optional[str] = None,
    limit: int = 20,
) -> int:
    """Search the local catalogue and print a results table."""
    from sample_scout.domain.library import fetch_candidates
    from sample_scout.domain.search import SearchQuery, search

    config = load_config()
    init_database()

    search_query = SearchQuery.from_params(q=query, bpm=bpm, key=key)
    with get_db_connection() as conn:
        candidates = fetch_candidates(conn)

    results = search(
        candidates,
        search_query,
        bpm_tolerance=config.search.bpm_tolerance,
        min_match_score=config.search.min_match_score,
    )

    if not results:
        log(f"No sounds found for '{query}'")
        return 0

    table = Table(title=f"{len(results)} sounds for '{query}'")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Tags")
    table.add_column("BPM", justify="right")
    table.add_column("Key")
    table.add_column("ID", style="dim")

    for sound in results[:limit]:
        table.add_row(
            f"{sound.match_score:g}",
            sound.name,
            ", ".join(sound.tag_list),
            str(sound.bpm) if sound.bpm is not None else "-",
            sound.key or "-",
            sound.id,
        )

    get_console().print(table)
    return 0


def run_add_sound(
    name: str,
    tags: list[str],
    bpm: Optional[int] = None,
    key: Optional[str] = None,
    audio_url: Optional[str] = None,
    library_id: Optional[int] = None,
) -> int:
    """Add a sound to a library (default: the local user's default library)."""
    from sample_scout.domain.library import (
        LibraryError,
        add_sound,
        get_or_create_default_library,
    )
    from sample_scout.domain.quota import ensure_user

    init_database()

    with get_db_connection() as conn:
        try:
            if library_id is None:
                ensure_user(conn, LOCAL_USER_ID)
                library_id = get_or_create_default_library(conn, LOCAL_USER_ID)["id"]

            sound = add_sound(
                conn,
                library_id,
                name,
                audio_url=audio_url,
                tags=tags,
                bpm=bpm,
                key=key,
            )
        except LibraryError as e:
            log(f"Could not add sound: {e}", level="error")
            return 1

    log(f"Added sound {sound.id}: {sound.name} [{', '.join(sound.tag_list)}]")
    return 0


def main() -> None:
    """Main entry point for the sample-scout command."""
    parser = argparse.ArgumentParser(
        description="Sample Scout - Search and curate short audio samples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the web API")
    serve_parser.add_argument("--host", help="Bind address (default: from config)")
    serve_parser.add_argument(
        "--port", type=int, help="Port to listen on (default: from config)"
    )

    subparsers.add_parser("init-db", help="Create the database schema")

    search_parser = subparsers.add_parser("search", help="Search the local catalogue")
    search_parser.add_argument("query", nargs="*", help="Search text")
    search_parser.add_argument("--bpm", help="Target BPM (+/- tolerance)")
    search_parser.add_argument("--key", help="Musical key, e.g. 'C minor'")
    search_parser.add_argument(
        "--limit", type=int, default=20, help="Maximum rows to show"
    )

    add_parser = subparsers.add_parser("add-sound", help="Add a sound to a library")
    add_parser.add_argument("name", help="Display name")
    add_parser.add_argument("--tags", nargs="+", default=[], help="Tag labels")
    add_parser.add_argument("--bpm", type=int, help="Tempo in BPM")
    add_parser.add_argument("--key", help="Musical key, e.g. 'A minor'")
    add_parser.add_argument("--audio-url", help="Public URL of the audio file")
    add_parser.add_argument(
        "--library-id", type=int, help="Target library (default: local library)"
    )

    args = parser.parse_args()

    if not args.subcommand:
        parser.print_help()
        sys.exit(1)

    setup_from_config(load_config().logging)

    if args.subcommand == "serve":
        sys.exit(run_serve(args.host, args.port))
    elif args.subcommand == "init-db":
        sys.exit(run_init_db())
    elif args.subcommand == "search":
        sys.exit(run_search(" ".join(args.query), args.bpm, args.key, args.limit))
    elif args.subcommand == "add-sound":
        sys.exit(
            run_add_sound(
                args.name,
                args.tags,
                bpm=args.bpm,
                key=args.key,
                audio_url=args.audio_url,
                library_id=args.library_id,
            )
        )


if __name__ == "__main__":
    main()
