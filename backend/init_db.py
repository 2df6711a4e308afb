from sqlalchemy.engine import Engine
import logging

from database import engine as default_engine, Base
import models  # noqa: F401  registers tables on Base.metadata
import migrate_photo_column_type
from exceptions import DatabaseError

logger = logging.getLogger(__name__)

# Applied in order; each step inspects the live schema and is a no-op once applied.
ESSENTIAL_MIGRATIONS = [
    (migrate_photo_column_type.REVISION, migrate_photo_column_type.NAME, migrate_photo_column_type.upgrade),
]


def _run_essential_migrations(engine: Engine) -> int:
    """
    Run schema migrations required for the app to function.

    Returns:
        Number of migrations that changed the schema
    """
    migrations_run = 0
    for revision, name, upgrade in ESSENTIAL_MIGRATIONS:
        try:
            if upgrade(engine):
                migrations_run += 1
        except Exception as e:
            raise DatabaseError(f"migration {revision}_{name}", f"Migration {revision}_{name} failed: {e}") from e

    if migrations_run > 0:
        logger.info(f"✅ Database schema updated: {migrations_run} migration(s) applied")
    else:
        logger.debug("Database schema is up to date")

    return migrations_run


def init_database(engine: Engine | None = None):
    """Create all tables and bring older schemas up to date"""
    engine = engine or default_engine
    Base.metadata.create_all(bind=engine)
    _run_essential_migrations(engine)
    logger.info("✅ Database initialized successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
