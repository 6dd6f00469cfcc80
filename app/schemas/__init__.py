"""
Schemas package
"""
from app.schemas.book import (
    BookBase,
    BookCreate,
    BookUpdate,
    BookResponse
)
from app.schemas.order import (
    Address,
    ProductSnapshot,
    OrderBase,
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse
)
from app.schemas.user import (
    AdminLoginRequest,
    AdminLoginResponse,
    UserInfo
)

__all__ = [
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "Address",
    "ProductSnapshot",
    "OrderBase",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderResponse",
    "AdminLoginRequest",
    "AdminLoginResponse",
    "UserInfo"
]
