#!/usr/bin/env python3
"""Bring the database schema up to date.

Usage:
    python scripts/run_migrations.py                      # upgrade to head
    python scripts/run_migrations.py upgrade <revision>
    python scripts/run_migrations.py downgrade <revision>
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from replicator.config import Settings
from replicator.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def _alembic_config() -> Config:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))
    return config


def main(argv: list[str]) -> int:
    """Run the requested migration, reporting failures to Logfire."""
    direction = argv[1] if len(argv) > 1 else "upgrade"
    target = argv[2] if len(argv) > 2 else "head"
    if direction not in ("upgrade", "downgrade"):
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "migrations.run",
        direction=direction,
        target=target,
        environment=settings.environment,
    ):
        try:
            if direction == "upgrade":
                command.upgrade(_alembic_config(), target)
            else:
                command.downgrade(_alembic_config(), target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a broken schema
            raise

        logfire.info("Database migrations completed", direction=direction, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
