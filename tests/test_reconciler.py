"""
Unit tests for SnapshotReconciler using mocked catalog and repository.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.schemas.order import ProductSnapshot
from app.services.reconciler import SnapshotReconciler


def _book(book_id, title, price):
    return SimpleNamespace(id=book_id, title=title, new_price=price)


def _order(order_id, product_ids, products=None):
    return SimpleNamespace(id=order_id, product_ids=product_ids, products=products or [])


@pytest.fixture
def catalog():
    catalog = MagicMock()
    catalog.find_by_ids.return_value = [_book(1, "1984", 13), _book(2, "The Alchemist", 14)]
    return catalog


@pytest.fixture
def repository():
    return MagicMock()


@pytest.fixture
def reconciler(catalog, repository):
    return SnapshotReconciler(catalog, repository)


class TestBuildForCreate:

    def test_client_snapshot_is_kept_verbatim(self, reconciler, catalog):
        products = [ProductSnapshot(book_id=1, title="Signed copy", price=99)]

        snapshot = reconciler.build_for_create(products, [1])

        assert snapshot == [{"book_id": 1, "title": "Signed copy", "price": 99}]
        catalog.find_by_ids.assert_not_called()

    def test_snapshot_built_from_catalog(self, reconciler):
        snapshot = reconciler.build_for_create([], [2, 1])

        assert snapshot == [
            {"book_id": 2, "title": "The Alchemist", "price": 14},
            {"book_id": 1, "title": "1984", "price": 13},
        ]

    def test_unresolved_ids_are_dropped(self, reconciler):
        snapshot = reconciler.build_for_create([], [1, 404])

        assert snapshot == [{"book_id": 1, "title": "1984", "price": 13}]

    def test_nothing_supplied_gives_empty_snapshot(self, reconciler, catalog):
        assert reconciler.build_for_create([], []) == []
        catalog.find_by_ids.assert_not_called()

    def test_catalog_errors_propagate(self, reconciler, catalog):
        catalog.find_by_ids.side_effect = RuntimeError("catalog down")
        with pytest.raises(RuntimeError):
            reconciler.build_for_create([], [1])


class TestReconcileMany:

    def test_single_catalog_lookup_for_all_orders(self, reconciler, catalog, repository):
        orders = [_order(10, [1]), _order(11, [2, 1])]

        reconciler.reconcile_many(orders)

        catalog.find_by_ids.assert_called_once_with([1, 2, 1])
        repository.fill_products.assert_any_call(10, [{"book_id": 1, "title": "1984", "price": 13}])
        repository.fill_products.assert_any_call(11, [
            {"book_id": 2, "title": "The Alchemist", "price": 14},
            {"book_id": 1, "title": "1984", "price": 13},
        ])

    def test_orders_with_snapshot_are_left_alone(self, reconciler, catalog, repository):
        existing = [{"book_id": 1, "title": "Old title", "price": 5}]
        orders = [_order(10, [1], products=existing)]

        result = reconciler.reconcile_many(orders)

        assert result is orders
        assert orders[0].products == existing
        catalog.find_by_ids.assert_not_called()
        repository.fill_products.assert_not_called()

    def test_unresolved_id_becomes_placeholder(self, reconciler, repository):
        reconciler.reconcile_many([_order(10, [1, 404])])

        repository.fill_products.assert_called_once_with(10, [
            {"book_id": 1, "title": "1984", "price": 13},
            {"book_id": 404, "title": None, "price": None},
        ])

    def test_order_without_ids_is_not_persisted(self, reconciler, catalog, repository):
        reconciler.reconcile_many([_order(10, [])])

        catalog.find_by_ids.assert_not_called()
        repository.fill_products.assert_not_called()

    def test_lookup_failure_is_swallowed(self, reconciler, catalog, repository):
        catalog.find_by_ids.side_effect = RuntimeError("catalog down")
        orders = [_order(10, [1])]

        result = reconciler.reconcile_many(orders)

        assert result is orders
        assert orders[0].products == []
        repository.rollback.assert_called_once()

    def test_persist_failure_is_swallowed(self, reconciler, repository):
        repository.fill_products.side_effect = RuntimeError("write failed")

        result = reconciler.reconcile_many([_order(10, [1])])

        assert len(result) == 1
        repository.rollback.assert_called_once()


class TestReconcileOne:

    def test_reconciles_single_order(self, reconciler, repository):
        order = _order(10, [2])

        assert reconciler.reconcile_one(order) is order
        repository.fill_products.assert_called_once_with(
            10, [{"book_id": 2, "title": "The Alchemist", "price": 14}]
        )
