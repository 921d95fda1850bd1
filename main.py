#!/usr/bin/env python3
"""
National Monuments Explorer: launch the website.

Usage:
    python main.py                          # http://localhost:8080
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 0.0.0.0           # listen on all interfaces
    python main.py --db /path/to/monuments.sqlite3
    python main.py --state-match substring  # legacy state matching
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path

logger = logging.getLogger("monuments_api")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Launch the National Monuments Explorer website.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "8080")),
        help="Port to listen on (default: 8080 or APP_PORT env var)",
    )
    parser.add_argument(
        "--db", type=Path, default=None,
        help="Path to SQLite database (default: monuments.sqlite3 or APP_DB_PATH env var)",
    )
    parser.add_argument(
        "--state-match", choices=["exact", "substring"], default=None,
        help="How state pages match region lists (default: exact or APP_STATE_MATCH)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    parser.add_argument(
        "--no-browser", action="store_true",
        help="Don't open a browser window automatically",
    )
    args = parser.parse_args()

    # The app reads its settings from the environment at import time
    if args.db is not None:
        os.environ["APP_DB_PATH"] = str(args.db)
    if args.state_match is not None:
        os.environ["APP_STATE_MATCH"] = args.state_match

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    db_path = Path(os.getenv("APP_DB_PATH", "monuments.sqlite3"))
    if not db_path.exists():
        logger.warning("Database not found at %s; pass --db /path/to/monuments.sqlite3", db_path)

    try:
        import uvicorn
    except ImportError:
        logger.error("uvicorn is not installed: pip install 'uvicorn[standard]'")
        sys.exit(1)

    url = f"http://{'localhost' if args.host == '0.0.0.0' else args.host}:{args.port}"
    logger.info("Starting National Monuments Explorer at %s (database: %s)", url, db_path)

    if not args.no_browser:
        # Open browser after a short delay to let the server start
        import threading
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
