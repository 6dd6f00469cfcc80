"""
SQLAlchemy Order model
"""
from sqlalchemy import Column, Integer, BigInteger, String, Float, DateTime, JSON, CheckConstraint
from sqlalchemy.sql import func
from app.database import Base

ORDER_STATUSES = ('pending', 'received', 'shipped', 'delivered', 'cancelled')


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)  # Notification routing key, not unique
    address = Column(JSON, nullable=False)  # {city, country, state, zipcode}
    phone = Column(BigInteger, nullable=False)
    product_ids = Column(JSON, nullable=False, default=list)
    products = Column(JSON, nullable=False, default=list)  # Denormalized [{book_id, title, price}]
    total_price = Column(Float, nullable=False)
    status = Column(String(50), nullable=False, default='pending', index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'received', 'shipped', 'delivered', 'cancelled')",
            name='check_status_valid'
        ),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, email='{self.email}', total_price={self.total_price}, status='{self.status}')>"
