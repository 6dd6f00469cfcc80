"""
SQLAlchemy Book model
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, Text, Boolean, CheckConstraint
from sqlalchemy.sql import func
from app.database import Base


class Book(Base):
    """Book (catalog entry) database model"""
    
    __tablename__ = "books"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True, index=True)
    trending = Column(Boolean, nullable=False, default=False)
    cover_image = Column(String(500), nullable=True)
    old_price = Column(Float, nullable=True)
    new_price = Column(Float, nullable=False)  # Current price, copied into order snapshots
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint('new_price >= 0', name='check_new_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<Book(id={self.id}, title='{self.title}', new_price={self.new_price})>"
