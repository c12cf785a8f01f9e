# src/autorotate/scripts/migrate.py
"""Apply or roll back Alembic revisions for the rotation catalog schema."""
from __future__ import annotations

import argparse
from pathlib import Path

from alembic import command
from alembic.config import Config

from autorotate.core.settings import settings

MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


def alembic_config(database_url: str | None = None) -> Config:
    """Build an Alembic config pointing at the project's migrations folder."""
    cfg = Config(str(MIGRATIONS_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", database_url or settings.database_url_sync)
    return cfg


def run_upgrade(revision: str = "head", database_url: str | None = None) -> None:
    command.upgrade(alembic_config(database_url), revision)


def run_downgrade(revision: str, database_url: str | None = None) -> None:
    command.downgrade(alembic_config(database_url), revision)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run autorotate schema migrations")
    parser.add_argument("--database-url", default=None, help="Override the configured database URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade = subparsers.add_parser("upgrade", help="Upgrade to a revision (default: head)")
    upgrade.add_argument("revision", nargs="?", default="head")

    downgrade = subparsers.add_parser("downgrade", help="Downgrade to a revision")
    downgrade.add_argument("revision")

    subparsers.add_parser("current", help="Show the current revision")

    args = parser.parse_args()

    if args.command == "upgrade":
        run_upgrade(args.revision, args.database_url)
    elif args.command == "downgrade":
        run_downgrade(args.revision, args.database_url)
    else:
        command.current(alembic_config(args.database_url), verbose=True)


if __name__ == "__main__":
    main()
