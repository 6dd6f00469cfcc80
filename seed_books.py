#!/usr/bin/env python
"""
Script to seed the catalog with a starter set of books

Books are matched by title, so running it again updates them in place.
"""
import logging

from app.database import SessionLocal, init_db
from app.logging_config import setup_logging
from app.repositories.book_repository import BookRepository
from app.schemas.book import BookCreate
from app.services.book_service import BookService

logger = logging.getLogger("seed_books")

PLACEHOLDER_COVER = "/uploads/placeholder.webp"

BOOKS = [
    ("Manto: Selected Short Stories – Saadat Hasan Manto", "Fiction",
     "Iconic stories about partition and society’s struggles, written with raw honesty.", 1000, 800),
    ("The Reluctant Fundamentalist – Mohsin Hamid", "Fiction",
     "A gripping monologue of a Pakistani man in the U.S. after 9/11.", 1500, 1200),
    ("In the Line of Fire – Pervez Musharraf", "Autobiography",
     "Memoir of Pakistan’s former president, covering his military and political journey.", 1800, 1350),
    ("A Case of Exploding Mangoes – Mohammed Hanif", "Fiction",
     "A witty novel inspired by the mystery around General Zia-ul-Haq’s plane crash.", 1600, 1250),
    ("Songs of Blood and Sword – Fatima Bhutto", "Politics",
     "A personal and political narrative of the Bhutto family’s struggles.", 1700, 1300),
    ("To Kill a Mockingbird – Harper Lee", "Fiction",
     "A moving story about justice, racism, and childhood in America’s South.", 20, 15),
    ("1984 – George Orwell", "Fiction",
     "A chilling tale about surveillance, dictatorship, and freedom.", 18, 13),
    ("Pride and Prejudice – Jane Austen", "Romance",
     "A witty exploration of love, class, and society in 19th-century England.", 16, 12),
    ("The Alchemist – Paulo Coelho", "Inspirational",
     "A shepherd embarks on a magical journey to fulfill his destiny.", 19, 14),
    ("Harry Potter and the Philosopher’s Stone – J.K. Rowling", "Fantasy",
     "The beginning of the worldwide phenomenon of Harry Potter’s adventures at Hogwarts.", 25, 18),
]


def seed():
    """Upsert every starter book; a failing book is logged and skipped"""
    init_db()
    db = SessionLocal()
    service = BookService(BookRepository(db))
    try:
        for title, category, description, old_price, new_price in BOOKS:
            book_data = BookCreate(
                title=title,
                category=category,
                description=description,
                old_price=old_price,
                new_price=new_price,
                trending=False,
                cover_image=PLACEHOLDER_COVER
            )
            try:
                book = service.upsert_by_title(book_data)
                logger.info(f"Upserted: {book.title}")
            except Exception:
                db.rollback()
                logger.exception(f"Failed to upsert {title}")
    finally:
        db.close()
    logger.info("Seeding completed")


if __name__ == "__main__":
    setup_logging()
    seed()
