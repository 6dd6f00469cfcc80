"""
Pydantic schemas for order request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional, Union
from datetime import datetime

from app.schemas.book import BookResponse


class Address(BaseModel):
    """Postal address; only the city is required"""
    city: str = Field(..., min_length=1)
    country: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None


class ProductSnapshot(BaseModel):
    """Title and price of a book as captured on the order"""
    book_id: Optional[int] = Field(None, alias="bookId")
    title: Optional[str] = None
    price: Optional[Union[int, float]] = None
    
    model_config = ConfigDict(populate_by_name=True)


class OrderBase(BaseModel):
    """Base Order schema"""
    name: str = Field(..., min_length=1, description="Customer name")
    email: str = Field(..., min_length=1, description="Customer email, also the notification key")
    address: Address
    phone: int = Field(..., description="Customer phone number")
    total_price: float = Field(..., ge=0, alias="totalPrice", description="Order total")
    
    model_config = ConfigDict(populate_by_name=True)


class OrderCreate(OrderBase):
    """
    Schema for creating a new order
    
    A non-empty `products` snapshot is stored as given; otherwise it is
    built from `productIds` against the catalog.
    """
    product_ids: List[int] = Field(default_factory=list, alias="productIds")
    products: List[ProductSnapshot] = Field(default_factory=list)


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status (value checked by the service)"""
    status: Optional[str] = Field(None, description="pending, received, shipped, delivered or cancelled")


class OrderResponse(OrderBase):
    """
    Schema for order response
    
    `productIds` holds plain ids right after creation and full book
    entries on every read.
    """
    id: int
    product_ids: List[Union[BookResponse, int]] = Field(default_factory=list, alias="productIds")
    products: List[ProductSnapshot] = Field(default_factory=list)
    status: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
