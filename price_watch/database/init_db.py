"""Database initialization tool for creating a fresh Price Watch database.

This tool:
1. Creates a fresh database with the complete schema
2. Stamps it with the latest Alembic revision (when alembic.ini is present)
3. Optionally adds a sample watch item with price history
4. Validates the schema

Usage:
    price-watch-init-db [--force] [--sample-data --user USER_ID]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from sqlalchemy import inspect

from price_watch.config import settings
from price_watch.database.session import build_engine, create_tables

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parent.parent.parent / "alembic.ini"

EXPECTED_TABLES = ["price_watch_items", "price_snapshots"]


class DatabaseInitializer:
    """Manages initialization of a fresh Price Watch database.

    Attributes:
        db_path: Path to database file
        force: If True, overwrite existing database
        sample_user: If set, add a sample item owned by this user
    """

    def __init__(self, db_path: Path, force: bool = False, sample_user: Optional[str] = None):
        self.db_path = db_path
        self.force = force
        self.sample_user = sample_user
        self.engine = build_engine(f"sqlite:///{self.db_path}")

    def check_database_exists(self) -> bool:
        """Check if database file already exists."""
        return self.db_path.exists()

    def remove_existing_database(self) -> None:
        """Remove existing database file."""
        if self.db_path.exists():
            logger.warning(f"Removing existing database: {self.db_path}")
            self.engine.dispose()
            self.db_path.unlink()

    def create_tables(self) -> None:
        """Create all database tables directly from models."""
        logger.info("Creating database tables from models...")
        create_tables(self.engine)

    def stamp_revision(self) -> None:
        """Mark the new database as being at the latest Alembic revision.

        Skipped when alembic.ini is not available (installed package).
        """
        if not ALEMBIC_INI.is_file():
            logger.info("alembic.ini not found, skipping revision stamp")
            return

        from alembic import command
        from alembic.config import Config

        alembic_cfg = Config(str(ALEMBIC_INI))
        alembic_cfg.set_main_option("sqlalchemy.url", f"sqlite:///{self.db_path}")
        command.stamp(alembic_cfg, "head")
        logger.info("Database stamped at latest revision")

    def create_sample_data(self, user_id: str) -> str:
        """Create a sample watch item with two price snapshots.

        Args:
            user_id: Owner of the sample item

        Returns:
            ID of the created watch item
        """
        from sqlalchemy.orm import sessionmaker

        from price_watch.models.price_snapshot import PriceSnapshotCreate
        from price_watch.models.watch_item import WatchItemCreate
        from price_watch.services.price_watch_service import PriceWatchService

        session = sessionmaker(bind=self.engine)()
        try:
            service = PriceWatchService(session)
            item = service.create_item(
                user_id,
                WatchItemCreate(
                    product_name="Sample Widget",
                    target_price=9.99,
                    currency="USD",
                    product_url="https://example.com/widget",
                    notes="Created by price-watch-init-db",
                ),
            )
            for price in (12.5, 11.75):
                service.add_snapshot(
                    user_id,
                    PriceSnapshotCreate(
                        item_id=item.id, price=price, currency="USD", source="sample"
                    ),
                )
            return item.id
        finally:
            session.close()

    def validate_schema(self) -> bool:
        """Validate that the expected tables and foreign key exist.

        Returns:
            True if validation passes, False otherwise
        """
        logger.info("Validating database schema...")

        inspector = inspect(self.engine)
        table_names = inspector.get_table_names()

        checks_passed = 0
        checks_total = len(EXPECTED_TABLES) + 1

        for table in EXPECTED_TABLES:
            if table in table_names:
                logger.info(f"Table '{table}' exists")
                checks_passed += 1
            else:
                logger.error(f"Table '{table}' missing")

        if "price_snapshots" in table_names:
            snapshot_fks = inspector.get_foreign_keys("price_snapshots")
            if any(fk["referred_table"] == "price_watch_items" for fk in snapshot_fks):
                logger.info("PriceSnapshots -> PriceWatchItems foreign key exists")
                checks_passed += 1
            else:
                logger.error("PriceSnapshots -> PriceWatchItems foreign key missing")

        logger.info(f"Validation: {checks_passed}/{checks_total} checks passed")
        return checks_passed == checks_total

    def run(self) -> bool:
        """Run the complete initialization process.

        Returns:
            True if initialization succeeded, False otherwise
        """
        if self.check_database_exists():
            if self.force:
                logger.warning("Database exists. Force mode enabled - will overwrite.")
                self.remove_existing_database()
            else:
                logger.error(
                    "Database already exists. Use --force to overwrite, "
                    "or remove the database manually."
                )
                return False

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Database location: {self.db_path}")

        try:
            self.create_tables()
            self.stamp_revision()
        except Exception as e:
            logger.error(f"Schema creation failed: {e}")
            return False

        if self.sample_user:
            try:
                item_id = self.create_sample_data(self.sample_user)
                logger.info(f"Sample watch item: {item_id}")
            except Exception as e:
                logger.error(f"Sample data creation failed: {e}")
                return False

        if not self.validate_schema():
            logger.error("Schema validation failed")
            return False

        logger.info(f"Database initialized successfully: {self.db_path}")
        self.engine.dispose()
        return True


def main(argv: Optional[list] = None) -> int:
    """Entry point for the ``price-watch-init-db`` command.

    Example:
        $ price-watch-init-db
        $ price-watch-init-db --force --sample-data --user user-1
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    parser = argparse.ArgumentParser(
        description="Initialize a fresh Price Watch database"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing database if present"
    )
    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add a sample watch item with price history"
    )
    parser.add_argument(
        "--user",
        default=None,
        help="Owner of the sample watch item (required with --sample-data)"
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=None,
        help="Database file (defaults to PRICE_WATCH_DATABASE_PATH)"
    )

    args = parser.parse_args(argv)
    if args.sample_data and not args.user:
        parser.error("--sample-data requires --user")

    initializer = DatabaseInitializer(
        db_path=(args.db_path or settings.get_database_path()).expanduser(),
        force=args.force,
        sample_user=args.user if args.sample_data else None,
    )
    return 0 if initializer.run() else 1


if __name__ == "__main__":
    sys.exit(main())
