"""
Services package
"""
from app.services.book_service import BookService
from app.services.catalog import BookCatalog
from app.services.notification_hub import NotificationHub, SSEStream
from app.services.order_service import OrderService
from app.services.reconciler import SnapshotReconciler
from app.services.user_service import UserService

__all__ = [
    "BookService",
    "BookCatalog",
    "NotificationHub",
    "SSEStream",
    "OrderService",
    "SnapshotReconciler",
    "UserService"
]
