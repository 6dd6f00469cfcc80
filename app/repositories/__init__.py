"""
Repositories package
"""
from app.repositories.book_repository import BookRepository
from app.repositories.order_repository import OrderRepository
from app.repositories.user_repository import UserRepository

__all__ = ["BookRepository", "OrderRepository", "UserRepository"]
