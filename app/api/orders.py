"""
Order API endpoints
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.auth import require_admin
from app.config import settings
from app.database import get_db
from app.exceptions import OrderPersistenceError
from app.repositories.book_repository import BookRepository
from app.repositories.order_repository import OrderRepository
from app.schemas.order import OrderCreate, OrderStatusUpdate, OrderResponse
from app.services.catalog import BookCatalog
from app.services.notification_hub import NotificationHub, SSEStream
from app.services.order_service import OrderService, is_valid_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["orders"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def get_hub(request: Request) -> NotificationHub:
    """Dependency returning the application's notification hub"""
    return request.app.state.hub


def get_order_service(
    db: Session = Depends(get_db),
    hub: NotificationHub = Depends(get_hub)
) -> OrderService:
    """Dependency to get OrderService instance"""
    catalog = BookCatalog(BookRepository(db))
    return OrderService(OrderRepository(db), catalog, hub)


@router.post("", response_model=OrderResponse, summary="Create order")
def create_order(
    order_data: OrderCreate,
    background_tasks: BackgroundTasks,
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order
    
    - **name**, **email**, **address.city**, **phone**, **totalPrice**: required
    - **productIds**: catalog IDs of the ordered books
    - **products**: optional snapshot `[{bookId, title, price}]`; when
      given it is stored as is, otherwise it is built from **productIds**
    
    Open streams for the order's email receive an `order-created` event.
    """
    try:
        order = service.create_order(order_data)
    except OrderPersistenceError:
        logger.exception("Error creating order")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create order"
        )
    
    background_tasks.add_task(service.publish_order_created, order)
    return order


@router.get("/all", response_model=List[OrderResponse], summary="Get all orders")
def get_all_orders(
    _admin: dict = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve all orders, newest first (admin only)
    
    Orders stored without a product snapshot get one built and saved.
    """
    try:
        return service.get_all_orders()
    except OrderPersistenceError:
        logger.exception("Error fetching all orders")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch orders"
        )


@router.get("/subscribe", summary="Subscribe to order events")
async def subscribe(
    email: Optional[str] = Query(None, description="Customer email to receive events for"),
    hub: NotificationHub = Depends(get_hub)
):
    """
    Open a Server-Sent Events stream of `order-created` and
    `order-updated` events for one email
    
    The subscription ends when the client disconnects.
    """
    if not email or not email.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing email query param"
        )
    
    stream = SSEStream(max_buffered=settings.SSE_QUEUE_SIZE)
    return StreamingResponse(
        stream_events(hub, email, stream),
        media_type="text/event-stream",
        headers=SSE_HEADERS
    )


async def stream_events(hub: NotificationHub, email: str, stream: SSEStream):
    """Body of a subscription response; registered for as long as it is iterated"""
    hub.subscribe(email, stream)
    try:
        # Blank line flushes the handshake before the first event
        yield "\n"
        async for frame in stream:
            yield frame
    finally:
        stream.close()
        hub.unsubscribe(email, stream)


@router.get("/email/{email}", response_model=List[OrderResponse], summary="Get orders by customer")
@router.get("/by-email/{email}", response_model=List[OrderResponse], include_in_schema=False)
def get_orders_by_email(
    email: str,
    service: OrderService = Depends(get_order_service)
):
    """
    Get all orders for a customer email, newest first
    
    - **email**: Customer email address
    """
    try:
        return service.get_orders_by_email(email)
    except OrderPersistenceError:
        logger.exception("Error fetching orders")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch order"
        )


@router.put("/{order_id}/status", response_model=OrderResponse, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    background_tasks: BackgroundTasks,
    _admin: dict = Depends(require_admin),
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status (admin only)
    
    - **order_id**: Order ID
    - **status**: pending, received, shipped, delivered or cancelled
    
    Open streams for the order's email receive an `order-updated` event.
    """
    if not is_valid_status(status_data.status):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status"
        )
    
    try:
        order = service.update_order_status(order_id, status_data.status)
    except OrderPersistenceError:
        logger.exception("Error updating order status")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update order status"
        )
    
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    
    background_tasks.add_task(service.publish_order_updated, order)
    return order
