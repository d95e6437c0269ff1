"""Tests for PriceWatchService."""

import pytest

from price_watch.exceptions import NotFoundError
from price_watch.models.price_snapshot import PriceSnapshotCreate
from price_watch.models.watch_item import WatchItemCreate, WatchItemUpdate
from price_watch.services.price_watch_service import PriceWatchService


class TestPriceWatchService:
    """Tests for PriceWatchService against the in-memory database."""

    @pytest.fixture
    def service(self, test_db):
        return PriceWatchService(test_db)

    @pytest.fixture
    def item(self, service):
        return service.create_item("user-1", WatchItemCreate(productName="Widget"))

    def test_get_owned_item(self, service, item):
        assert service.get_owned_item(item.id, "user-1").id == item.id

    def test_get_owned_item_other_user_not_found(self, service, item):
        with pytest.raises(NotFoundError) as exc_info:
            service.get_owned_item(item.id, "user-2")
        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.message == "Price watch item not found."

    def test_get_owned_item_missing_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get_owned_item("missing", "user-1")

    def test_update_item(self, service, item):
        updated = service.update_item(
            "user-1", WatchItemUpdate(id=item.id, targetPrice=9.99, currency="EUR")
        )
        assert updated.target_price == 9.99
        assert updated.currency == "EUR"
        assert updated.product_name == "Widget"

    def test_update_foreign_item_not_found_and_unchanged(self, service, item):
        with pytest.raises(NotFoundError):
            service.update_item("user-2", WatchItemUpdate(id=item.id, productName="Stolen"))
        assert service.get_owned_item(item.id, "user-1").product_name == "Widget"

    def test_deactivate_hides_from_default_list(self, service, item):
        service.update_item("user-1", WatchItemUpdate(id=item.id, isActive=False))
        assert service.list_items("user-1") == []
        assert len(service.list_items("user-1", include_inactive=True)) == 1

    def test_add_and_list_snapshots(self, service, item):
        snapshot = service.add_snapshot(
            "user-1", PriceSnapshotCreate(itemId=item.id, price=12.5)
        )
        assert snapshot.item_id == item.id
        assert snapshot.success is True

        snapshots = service.list_snapshots("user-1", item.id)
        assert [s.id for s in snapshots] == [snapshot.id]

    def test_add_snapshot_foreign_item_not_found(self, service, item):
        with pytest.raises(NotFoundError):
            service.add_snapshot("user-2", PriceSnapshotCreate(itemId=item.id, price=1.0))
        assert service.list_snapshots("user-1", item.id) == []

    def test_list_snapshots_foreign_item_not_found(self, service, item):
        with pytest.raises(NotFoundError):
            service.list_snapshots("user-2", item.id)
