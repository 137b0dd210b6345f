from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class ProductCreate(BaseModel):
    """Schema for creating a new product."""
    name: str = Field(..., min_length=1, description="Product name")
    price: float = Field(..., gt=0, description="Product price (must be positive)")
    stock: int = Field(..., ge=0, description="Available stock (must be non-negative)")


class ProductResponse(BaseModel):
    """Schema for product response including the formatted price."""
    name: str
    price: float
    stock: int
    price_display: str

    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for product list response."""
    items: list[ProductResponse]
    total: int
    search: Optional[str] = None


class StatisticsResponse(BaseModel):
    """Schema for price statistics. Both products are null when the inventory is empty."""
    empty: bool
    cheapest: Optional[ProductResponse] = None
    most_expensive: Optional[ProductResponse] = None
