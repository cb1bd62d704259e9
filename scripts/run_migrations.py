#!/usr/bin/env python3
"""Apply the comment schema migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to "head".
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy.engine import make_url

from discuss.config import Settings
from discuss.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    try:
        head = ScriptDirectory.from_config(alembic_cfg).get_current_head()
        logfire.info(
            "Starting comment schema migration",
            database=database,
            target=target,
            head=head,
        )

        command.upgrade(alembic_cfg, target)

        logfire.info("Comment schema migrated", database=database, target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Comment schema migration failed",
            database=database,
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The API must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
