import pytest
from sqlalchemy import create_engine, inspect, text

import migrate_photo_column_type
from init_db import init_database
from migrate_photo_column_type import downgrade, photo_column_length, upgrade

LEGACY_SCHEMA = """
    CREATE TABLE business_cards (
        id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        gender VARCHAR(10),
        date_of_birth DATE NOT NULL,
        email VARCHAR(100) NOT NULL,
        phone VARCHAR(15),
        address VARCHAR(255),
        photo VARCHAR(500)
    )
"""


@pytest.fixture
def file_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'cards.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def legacy_engine(file_engine):
    with file_engine.begin() as conn:
        conn.execute(text(LEGACY_SCHEMA))
        conn.execute(text(
            "INSERT INTO business_cards (name, email, date_of_birth, photo) "
            "VALUES ('Old Card', 'old@example.com', '1970-01-01', 'abc')"
        ))
    return file_engine


def test_fresh_database_needs_no_migration(file_engine):
    init_database(file_engine)

    assert "business_cards" in inspect(file_engine).get_table_names()
    assert photo_column_length(file_engine) is None
    assert upgrade(file_engine) is False


def test_init_widens_legacy_photo_column_and_keeps_rows(legacy_engine):
    assert photo_column_length(legacy_engine) == 500

    init_database(legacy_engine)

    assert photo_column_length(legacy_engine) is None
    with legacy_engine.begin() as conn:
        row = conn.execute(text("SELECT name, email, photo FROM business_cards")).one()
        assert tuple(row) == ("Old Card", "old@example.com", "abc")
        conn.execute(text(
            "INSERT INTO business_cards (name, email, date_of_birth, photo) "
            "VALUES ('New Card', 'new@example.com', '1980-01-01', :photo)"
        ), {"photo": "x" * 5000})
    indexes = [index["name"] for index in inspect(legacy_engine).get_indexes("business_cards")]
    assert "idx_business_cards_email" in indexes


def test_upgrade_is_idempotent(legacy_engine):
    assert upgrade(legacy_engine) is True
    assert upgrade(legacy_engine) is False


def test_downgrade_restores_bounded_column(legacy_engine):
    upgrade(legacy_engine)

    assert downgrade(legacy_engine) is True
    assert photo_column_length(legacy_engine) == 500
    assert downgrade(legacy_engine) is False
    with legacy_engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM business_cards")).scalar() == 1


def test_downgrade_without_table_is_noop(file_engine):
    assert downgrade(file_engine) is False


def test_failed_migration_is_reported(legacy_engine, monkeypatch):
    from exceptions import DatabaseError
    import init_db

    def broken(engine):
        raise RuntimeError("boom")

    monkeypatch.setattr(init_db, "ESSENTIAL_MIGRATIONS", [
        (migrate_photo_column_type.REVISION, migrate_photo_column_type.NAME, broken),
    ])

    with pytest.raises(DatabaseError, match="20241005231120_update_photo_column_type failed: boom"):
        init_database(legacy_engine)
