"""
Order Service - Business Logic Layer
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import OrderPersistenceError
from app.models.order import Order, ORDER_STATUSES
from app.repositories.order_repository import OrderRepository
from app.schemas.book import BookResponse
from app.schemas.order import OrderCreate, OrderResponse
from app.services.catalog import BookCatalog
from app.services.notification_hub import NotificationHub, ORDER_CREATED, ORDER_UPDATED
from app.services.reconciler import SnapshotReconciler

logger = logging.getLogger(__name__)


def is_valid_status(status: Optional[str]) -> bool:
    """True for one of the known order statuses"""
    return status in ORDER_STATUSES


class OrderService:
    """Service layer for order business logic"""

    def __init__(self, repository: OrderRepository, catalog: BookCatalog, hub: NotificationHub):
        self.repository = repository
        self.catalog = catalog
        self.hub = hub
        self.reconciler = SnapshotReconciler(catalog, repository)

    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Create new order

        Steps:
        1. Build the product snapshot (client snapshot or catalog lookup)
        2. Save order to database
        3. Return order response

        The `order-created` event is sent separately through
        `publish_event` once the response is out.

        Raises:
            OrderPersistenceError: If the catalog lookup or the write fails
        """
        try:
            snapshot = self.reconciler.build_for_create(order_data.products, order_data.product_ids)

            order_dict = {
                'name': order_data.name,
                'email': order_data.email,
                'address': order_data.address.model_dump(),
                'phone': order_data.phone,
                'product_ids': list(order_data.product_ids),
                'products': snapshot,
                'total_price': order_data.total_price,
                'status': 'pending'
            }
            order = self.repository.create(order_dict)
        except SQLAlchemyError as e:
            self.repository.rollback()
            raise OrderPersistenceError(f"Failed to create order: {e}") from e

        logger.info(f"Order {order.id} created for {order.email}")
        return self._to_response(order)

    def get_orders_by_email(self, email: str) -> List[OrderResponse]:
        """Get orders by customer email, newest first"""
        try:
            orders = self.repository.get_by_email(email)
            orders = self.reconciler.reconcile_many(orders)
            return self._populate(orders)
        except SQLAlchemyError as e:
            raise OrderPersistenceError(f"Failed to fetch orders for {email}: {e}") from e

    def get_all_orders(self) -> List[OrderResponse]:
        """Get all orders, newest first, with snapshots backfilled"""
        try:
            orders = self.repository.get_all()
            orders = self.reconciler.reconcile_many(orders)
            return self._populate(orders)
        except SQLAlchemyError as e:
            raise OrderPersistenceError(f"Failed to fetch orders: {e}") from e

    def update_order_status(self, order_id: int, new_status: str) -> Optional[OrderResponse]:
        """
        Update order status

        Any status may follow any other. The snapshot is backfilled before
        the updated order is returned so that the `order-updated` event
        carries titles and prices.

        Args:
            order_id: Order ID
            new_status: New status value, already validated

        Returns:
            Updated order or None if not found
        """
        try:
            order = self.repository.update_status(order_id, new_status)
            if not order:
                return None

            order = self.reconciler.reconcile_one(order)
            logger.info(f"Order {order.id} status set to {new_status}")
            return self._populate([order])[0]
        except SQLAlchemyError as e:
            self.repository.rollback()
            raise OrderPersistenceError(f"Failed to update order {order_id}: {e}") from e

    def publish_event(self, event_name: str, order: OrderResponse) -> None:
        """Push an order event to the customer's open streams (best effort)"""
        try:
            payload = order.model_dump(mode="json", by_alias=True)
            self.hub.publish(order.email, event_name, payload)
        except Exception as e:
            # Notification failures never affect the order itself
            logger.warning(f"Failed to publish {event_name} event for order {order.id}: {e}")

    def publish_order_created(self, order: OrderResponse) -> None:
        self.publish_event(ORDER_CREATED, order)

    def publish_order_updated(self, order: OrderResponse) -> None:
        self.publish_event(ORDER_UPDATED, order)

    def _populate(self, orders: List[Order]) -> List[OrderResponse]:
        """Build responses with `productIds` resolved to full book entries"""
        ids = [book_id for o in orders for book_id in (o.product_ids or [])]
        books: Dict[int, BookResponse] = {}
        if ids:
            books = {b.id: b for b in self.catalog.find_by_ids(ids)}

        return [
            self._to_response(o, [books[i] for i in (o.product_ids or []) if i in books])
            for o in orders
        ]

    @staticmethod
    def _to_response(order: Order, product_refs: Optional[list] = None) -> OrderResponse:
        return OrderResponse(
            id=order.id,
            name=order.name,
            email=order.email,
            address=order.address,
            phone=order.phone,
            product_ids=product_refs if product_refs is not None else list(order.product_ids or []),
            products=order.products or [],
            total_price=order.total_price,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at
        )
