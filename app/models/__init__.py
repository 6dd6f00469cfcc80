"""
Models package
"""
from app.models.book import Book
from app.models.order import Order
from app.models.user import User

__all__ = ["Book", "Order", "User"]
