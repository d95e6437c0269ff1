"""Tests for the database initialization tool."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine, text

from price_watch.database.init_db import DatabaseInitializer, main


@pytest.fixture
def no_stamp():
    """Skip the Alembic stamp step."""
    with patch.object(DatabaseInitializer, "stamp_revision"):
        yield


class TestDatabaseInitializer:
    def test_creates_schema(self, tmp_path, no_stamp):
        db_path = tmp_path / "nested" / "watch.db"
        initializer = DatabaseInitializer(db_path)

        assert initializer.run() is True
        assert db_path.exists()
        assert initializer.validate_schema() is True

    def test_refuses_existing_database(self, tmp_path, no_stamp):
        db_path = tmp_path / "watch.db"
        db_path.write_bytes(b"")

        assert DatabaseInitializer(db_path).run() is False

    def test_force_recreates_database(self, tmp_path, no_stamp):
        db_path = tmp_path / "watch.db"
        assert DatabaseInitializer(db_path, sample_user="user-1").run() is True
        assert DatabaseInitializer(db_path, force=True).run() is True

        engine = create_engine(f"sqlite:///{db_path}")
        with engine.connect() as conn:
            count = conn.execute(text("SELECT COUNT(*) FROM price_watch_items")).scalar()
        engine.dispose()
        assert count == 0

    def test_sample_data(self, tmp_path, no_stamp):
        db_path = tmp_path / "watch.db"
        assert DatabaseInitializer(db_path, sample_user="user-1").run() is True

        engine = create_engine(f"sqlite:///{db_path}")
        with engine.connect() as conn:
            owner = conn.execute(text("SELECT user_id FROM price_watch_items")).scalar()
            snapshots = conn.execute(text("SELECT COUNT(*) FROM price_snapshots")).scalar()
        engine.dispose()
        assert owner == "user-1"
        assert snapshots == 2

    def test_validate_schema_empty_database(self, tmp_path):
        initializer = DatabaseInitializer(tmp_path / "empty.db")
        assert initializer.validate_schema() is False


class TestMain:
    def test_main_success(self, tmp_path, no_stamp):
        db_path = tmp_path / "watch.db"
        assert main(["--db-path", str(db_path)]) == 0
        assert db_path.exists()

    def test_sample_data_requires_user(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--db-path", str(tmp_path / "watch.db"), "--sample-data"])
