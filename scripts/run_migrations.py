#!/usr/bin/env python3
"""Apply schema migrations for connection storage.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0a9d   # upgrade to a given revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from socialconnect.config import Settings
from socialconnect.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    """Upgrade the database, reporting failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Connection storage migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve with a stale schema
            raise

    logfire.info("Connection storage is at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
