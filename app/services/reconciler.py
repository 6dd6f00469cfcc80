"""
Snapshot Reconciler

Makes sure every order carries a `products` snapshot ({book_id, title,
price}) so that titles and prices stay readable even after the catalog
changes. New orders get their snapshot at creation time; orders stored
without one are repaired the first time they are read.
"""
import logging
from typing import Dict, List, Sequence

from app.models.order import Order
from app.repositories.order_repository import OrderRepository
from app.schemas.book import BookResponse
from app.schemas.order import ProductSnapshot
from app.services.catalog import BookCatalog

logger = logging.getLogger(__name__)


def snapshot_item(book: BookResponse) -> dict:
    """Snapshot entry for a resolved book"""
    return {"book_id": book.id, "title": book.title, "price": book.new_price}


class SnapshotReconciler:
    """Builds and repairs order product snapshots"""
    
    def __init__(self, catalog: BookCatalog, repository: OrderRepository):
        self.catalog = catalog
        self.repository = repository
    
    def build_for_create(self, products: Sequence[ProductSnapshot], product_ids: Sequence[int]) -> List[dict]:
        """
        Snapshot to store on a new order
        
        A client-supplied snapshot is kept as is. Otherwise the IDs are
        resolved against the catalog and IDs that do not resolve are
        dropped. Catalog errors propagate to the caller.
        """
        if products:
            return [p.model_dump() for p in products]
        if not product_ids:
            return []
        
        books = self._books_by_id(product_ids)
        return [snapshot_item(books[book_id]) for book_id in product_ids if book_id in books]
    
    def reconcile_many(self, orders: List[Order]) -> List[Order]:
        """
        Fill in missing snapshots for a batch of orders
        
        All catalog IDs referenced by orders without a snapshot are resolved
        in one lookup. IDs that no longer resolve become placeholder entries
        with no title or price so the line-item count is kept. Rebuilt
        snapshots are persisted, so each order is repaired at most once.
        Failures are logged and the orders are returned as they are.
        """
        missing = [o for o in orders if not o.products]
        if not missing:
            return orders
        
        try:
            ids = [book_id for o in missing for book_id in (o.product_ids or [])]
            books = self._books_by_id(ids) if ids else {}
            
            for order in missing:
                snapshot = self._rebuild(order.product_ids or [], books)
                if snapshot:
                    self.repository.fill_products(order.id, snapshot)
                    logger.info(f"Backfilled product snapshot for order {order.id}")
        except Exception:
            logger.exception("Failed to backfill product snapshots")
            self.repository.rollback()
        
        return orders
    
    def reconcile_one(self, order: Order) -> Order:
        """Fill in the snapshot of a single order (see reconcile_many)"""
        return self.reconcile_many([order])[0]
    
    def _books_by_id(self, book_ids: Sequence[int]) -> Dict[int, BookResponse]:
        return {b.id: b for b in self.catalog.find_by_ids(book_ids)}
    
    @staticmethod
    def _rebuild(product_ids: Sequence[int], books: Dict[int, BookResponse]) -> List[dict]:
        snapshot = []
        for book_id in product_ids:
            book = books.get(book_id)
            if book:
                snapshot.append(snapshot_item(book))
            else:
                snapshot.append({"book_id": book_id, "title": None, "price": None})
        return snapshot
