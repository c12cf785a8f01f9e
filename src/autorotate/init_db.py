"""Create tables and seed the singleton records."""

import logging

from autorotate.db.session import SessionLocal, create_tables
from autorotate.services.access import AccessGate
from autorotate.services.registry import EntityRegistry
from autorotate.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables and seeding defaults."""
    create_tables()
    db = SessionLocal()
    try:
        SettingsStore(db).seed_global_defaults()
        AccessGate(db, EntityRegistry(db)).seed_administrator()
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    logger.info("Database initialized.")
