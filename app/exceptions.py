"""
Bookstore Service exceptions
"""


class BookstoreError(Exception):
    """Base exception for Bookstore Service errors"""
    pass


class OrderPersistenceError(BookstoreError):
    """Order could not be written to or read from the database"""
    pass


class StreamClosedError(BookstoreError):
    """Write attempted on a notification stream that is already closed"""
    pass
