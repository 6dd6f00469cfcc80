"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from app.models.order import Order


class OrderRepository:
    """Repository for Order CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Order]:
        """Get all orders, newest first"""
        return self.db.query(Order).order_by(
            desc(Order.created_at), desc(Order.id)
        ).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get_by_email(self, email: str) -> List[Order]:
        """Get orders by customer email, newest first"""
        return self.db.query(Order).filter(
            Order.email == email
        ).order_by(desc(Order.created_at), desc(Order.id)).all()
    
    def create(self, order_data: dict) -> Order:
        """
        Create new order
        
        Args:
            order_data: Dictionary with order fields
        
        Returns:
            Created order
        """
        order = Order(**order_data)
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def update_status(self, order_id: int, new_status: str) -> Optional[Order]:
        """Update order status"""
        order = self.get_by_id(order_id)
        if not order:
            return None
        
        order.status = new_status
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def fill_products(self, order_id: int, products: List[dict]) -> Optional[Order]:
        """
        Store a product snapshot on an order that has none yet
        
        An order whose snapshot is already populated is returned unchanged.
        """
        order = self.get_by_id(order_id)
        if not order:
            return None
        if order.products:
            return order
        
        order.products = list(products)
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def rollback(self) -> None:
        """Discard the pending transaction after a failed write"""
        self.db.rollback()
