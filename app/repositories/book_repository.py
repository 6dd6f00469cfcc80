"""
Book Repository - Data Access Layer
"""
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from app.models.book import Book
from app.schemas.book import BookCreate, BookUpdate


class BookRepository:
    """Repository for Book CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Book]:
        """Get all books, newest first"""
        return self.db.query(Book).order_by(desc(Book.created_at), desc(Book.id)).all()
    
    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get book by ID"""
        return self.db.query(Book).filter(Book.id == book_id).first()
    
    def get_by_ids(self, book_ids: Iterable[int]) -> List[Book]:
        """Get the books matching any of the IDs; unknown IDs are absent from the result"""
        book_ids = list(book_ids)
        if not book_ids:
            return []
        return self.db.query(Book).filter(Book.id.in_(book_ids)).all()
    
    def get_by_title(self, title: str) -> Optional[Book]:
        """Get book by exact title"""
        return self.db.query(Book).filter(Book.title == title).first()
    
    def create(self, book_data: BookCreate) -> Book:
        """Create new book"""
        book = Book(**book_data.model_dump())
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book
    
    def update(self, book_id: int, book_data: BookUpdate) -> Optional[Book]:
        """Update existing book"""
        book = self.get_by_id(book_id)
        if not book:
            return None
        
        # Update only provided fields
        update_data = book_data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(book, field, value)
        
        self.db.commit()
        self.db.refresh(book)
        return book
    
    def delete(self, book_id: int) -> bool:
        """Delete book"""
        book = self.get_by_id(book_id)
        if not book:
            return False
        
        self.db.delete(book)
        self.db.commit()
        return True
