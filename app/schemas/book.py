"""
Pydantic schemas for book request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class BookBase(BaseModel):
    """Base Book schema with common fields"""
    title: str = Field(..., min_length=1, max_length=255, description="Book title")
    description: Optional[str] = Field(None, description="Book description")
    category: Optional[str] = Field(None, max_length=100, description="Book category")
    trending: bool = Field(False, description="Shown in the trending section")
    cover_image: Optional[str] = Field(None, max_length=500, alias="coverImage", description="Cover image URL")
    old_price: Optional[float] = Field(None, ge=0, alias="oldPrice", description="Price before discount")
    new_price: float = Field(..., ge=0, alias="newPrice", description="Current price")
    
    model_config = ConfigDict(populate_by_name=True)


class BookCreate(BookBase):
    """Schema for creating a new book"""
    pass


class BookUpdate(BaseModel):
    """Schema for updating a book (all fields optional)"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    trending: Optional[bool] = None
    cover_image: Optional[str] = Field(None, max_length=500, alias="coverImage")
    old_price: Optional[float] = Field(None, ge=0, alias="oldPrice")
    new_price: Optional[float] = Field(None, ge=0, alias="newPrice")
    
    model_config = ConfigDict(populate_by_name=True)


class BookResponse(BookBase):
    """Schema for book response"""
    id: int
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
