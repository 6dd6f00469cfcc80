"""
Catalog lookup used by the order side
"""
from typing import Iterable, List

from app.repositories.book_repository import BookRepository
from app.schemas.book import BookResponse


class BookCatalog:
    """Read-only view of the book catalog"""
    
    def __init__(self, repository: BookRepository):
        self.repository = repository
    
    def find_by_ids(self, book_ids: Iterable[int]) -> List[BookResponse]:
        """
        Resolve catalog IDs to book entries
        
        Duplicate IDs are looked up once. IDs that do not resolve are
        simply missing from the result.
        """
        unique_ids = list(dict.fromkeys(book_ids))
        books = self.repository.get_by_ids(unique_ids)
        return [BookResponse.model_validate(b) for b in books]
