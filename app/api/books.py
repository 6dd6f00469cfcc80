"""
Book API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from app.auth import require_admin
from app.database import get_db
from app.repositories.book_repository import BookRepository
from app.services.book_service import BookService
from app.schemas.book import (
    BookCreate,
    BookUpdate,
    BookResponse
)

router = APIRouter(prefix="/api/books", tags=["books"])


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    """Dependency to get BookService instance"""
    return BookService(BookRepository(db))


@router.get("", response_model=List[BookResponse], summary="Get all books")
def get_books(service: BookService = Depends(get_book_service)):
    """Retrieve the whole catalog, newest first"""
    return service.get_all_books()


@router.get("/{book_id}", response_model=BookResponse, summary="Get book by ID")
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service)
):
    """
    Retrieve a specific book by ID
    
    - **book_id**: Book ID
    """
    book = service.get_book_by_id(book_id)
    if not book:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id={book_id} not found"
        )
    return book


@router.post("/create-book", response_model=BookResponse, status_code=status.HTTP_201_CREATED, summary="Create book")
def create_book(
    book_data: BookCreate,
    _admin: dict = Depends(require_admin),
    service: BookService = Depends(get_book_service)
):
    """
    Add a book to the catalog (admin only)
    
    - **title**: Book title (required)
    - **newPrice**: Current price (required, non-negative)
    - **oldPrice**, **description**, **category**, **trending**, **coverImage**: optional
    """
    return service.create_book(book_data)


@router.put("/edit/{book_id}", response_model=BookResponse, summary="Update book")
def update_book(
    book_id: int,
    book_data: BookUpdate,
    _admin: dict = Depends(require_admin),
    service: BookService = Depends(get_book_service)
):
    """
    Update an existing book (admin only)
    
    All fields are optional. Only provided fields will be updated.
    """
    book = service.update_book(book_id, book_data)
    if not book:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id={book_id} not found"
        )
    return book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete book")
def delete_book(
    book_id: int,
    _admin: dict = Depends(require_admin),
    service: BookService = Depends(get_book_service)
):
    """
    Delete a book (admin only)
    
    - **book_id**: Book ID
    """
    success = service.delete_book(book_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id={book_id} not found"
        )
    return None
