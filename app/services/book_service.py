"""
Book Service - Business Logic Layer
"""
import logging
from typing import List, Optional

from app.repositories.book_repository import BookRepository
from app.schemas.book import BookCreate, BookUpdate, BookResponse

logger = logging.getLogger(__name__)


class BookService:
    """Service layer for catalog management"""
    
    def __init__(self, repository: BookRepository):
        self.repository = repository
    
    def get_all_books(self) -> List[BookResponse]:
        """Get all books, newest first"""
        return [BookResponse.model_validate(b) for b in self.repository.get_all()]
    
    def get_book_by_id(self, book_id: int) -> Optional[BookResponse]:
        """Get book by ID"""
        book = self.repository.get_by_id(book_id)
        if not book:
            return None
        return BookResponse.model_validate(book)
    
    def create_book(self, book_data: BookCreate) -> BookResponse:
        """Create new book"""
        book = self.repository.create(book_data)
        logger.info(f"Book {book.id} created: {book.title}")
        return BookResponse.model_validate(book)
    
    def update_book(self, book_id: int, book_data: BookUpdate) -> Optional[BookResponse]:
        """
        Update existing book
        
        Orders placed earlier keep the title and price from their snapshot.
        """
        book = self.repository.update(book_id, book_data)
        if not book:
            return None
        return BookResponse.model_validate(book)
    
    def delete_book(self, book_id: int) -> bool:
        """Delete book"""
        deleted = self.repository.delete(book_id)
        if deleted:
            logger.info(f"Book {book_id} deleted")
        return deleted
    
    def upsert_by_title(self, book_data: BookCreate) -> BookResponse:
        """Create a book, or overwrite the one with the same title"""
        existing = self.repository.get_by_title(book_data.title)
        if existing:
            book = self.repository.update(existing.id, BookUpdate(**book_data.model_dump()))
        else:
            book = self.repository.create(book_data)
        return BookResponse.model_validate(book)
