"""
Migration 20241005231120: Update photo column type

Early databases stored business_cards.photo as VARCHAR(500), which is too
small for a Base64 encoded image. This migration widens it to unbounded TEXT.
downgrade() restores the bounded column.

SQLite cannot alter a column type in place, so the table is recreated and
its rows copied across. Other dialects use ALTER COLUMN.
"""

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
import logging

from constants import FieldLimits

logger = logging.getLogger(__name__)

REVISION = "20241005231120"
NAME = "update_photo_column_type"
TABLE = "business_cards"

_ALTER_STATEMENTS = {
    'postgresql': "ALTER TABLE business_cards ALTER COLUMN photo TYPE {type}",
    'mysql': "ALTER TABLE business_cards MODIFY photo {type} NULL",
    'mariadb': "ALTER TABLE business_cards MODIFY photo {type} NULL",
    'mssql': "ALTER TABLE business_cards ALTER COLUMN photo {type} NULL",
}

_UNBOUNDED_TYPES = {
    'mssql': "NVARCHAR(MAX)",
}


def photo_column_length(engine: Engine) -> int | None:
    """
    Return the declared length of the photo column.

    Returns:
        The VARCHAR length, or None for an unbounded column or a missing table
    """
    inspector = inspect(engine)
    if TABLE not in inspector.get_table_names():
        return None
    for column in inspector.get_columns(TABLE):
        if column['name'] == 'photo':
            return getattr(column['type'], 'length', None)
    return None


def _rebuild_sqlite_table(engine: Engine, photo_type: str):
    with engine.begin() as conn:
        conn.execute(text(f"""
            CREATE TABLE business_cards_new (
                id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
                name VARCHAR({FieldLimits.NAME}) NOT NULL,
                gender VARCHAR({FieldLimits.GENDER}),
                date_of_birth DATE NOT NULL,
                email VARCHAR({FieldLimits.EMAIL}) NOT NULL,
                phone VARCHAR({FieldLimits.PHONE}),
                address VARCHAR({FieldLimits.ADDRESS}),
                photo {photo_type},
                CONSTRAINT ck_business_cards_name_not_empty CHECK (name != ''),
                CONSTRAINT ck_business_cards_email_not_empty CHECK (email != '')
            )
        """))
        conn.execute(text("""
            INSERT INTO business_cards_new
                (id, name, gender, date_of_birth, email, phone, address, photo)
            SELECT id, name, gender, date_of_birth, email, phone, address, photo
            FROM business_cards
        """))
        conn.execute(text("DROP TABLE business_cards"))
        conn.execute(text("ALTER TABLE business_cards_new RENAME TO business_cards"))
        conn.execute(text("CREATE INDEX idx_business_cards_email ON business_cards(email)"))


def _change_photo_type(engine: Engine, photo_type: str):
    dialect = engine.dialect.name
    if dialect == 'sqlite':
        _rebuild_sqlite_table(engine, photo_type)
        return
    statement = _ALTER_STATEMENTS.get(dialect)
    if statement is None:
        raise NotImplementedError(f"No photo column migration for dialect '{dialect}'")
    with engine.begin() as conn:
        conn.execute(text(statement.format(type=photo_type)))


def upgrade(engine: Engine) -> bool:
    """
    Widen the photo column to unbounded text.

    Returns:
        True if the schema changed, False if it was already current
    """
    if photo_column_length(engine) != FieldLimits.LEGACY_PHOTO:
        return False
    logger.info(f"Running migration {REVISION}_{NAME}: photo VARCHAR({FieldLimits.LEGACY_PHOTO}) -> TEXT")
    _change_photo_type(engine, _UNBOUNDED_TYPES.get(engine.dialect.name, "TEXT"))
    logger.info(f"✅ Migration {REVISION} complete")
    return True


def downgrade(engine: Engine) -> bool:
    """
    Restore the bounded VARCHAR(500) photo column.

    Returns:
        True if the schema changed, False if it was already bounded or absent
    """
    inspector = inspect(engine)
    if TABLE not in inspector.get_table_names():
        return False
    if photo_column_length(engine) == FieldLimits.LEGACY_PHOTO:
        return False
    logger.info(f"Reverting migration {REVISION}_{NAME}: photo TEXT -> VARCHAR({FieldLimits.LEGACY_PHOTO})")
    _change_photo_type(engine, f"VARCHAR({FieldLimits.LEGACY_PHOTO})")
    return True


def migrate():
    """Apply the migration to the configured database"""
    from database import engine

    try:
        if upgrade(engine):
            logger.info("✅ Photo column widened to TEXT")
        else:
            logger.info("✅ Photo column already unbounded - skipping migration")
    except Exception as e:
        logger.error(f"❌ Migration failed: {e}")
        raise


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    migrate()
