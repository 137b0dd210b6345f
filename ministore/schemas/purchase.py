from pydantic import BaseModel, Field


class PurchaseCreate(BaseModel):
    """Schema for buying a product."""
    name: str = Field(..., min_length=1, description="Name of the product to purchase (case-insensitive)")
    quantity: int = Field(default=1, ge=1, description="Quantity to purchase")


class PurchaseResponse(BaseModel):
    """Schema for a confirmed purchase."""
    name: str
    quantity: int
    unit_price: float
    subtotal: float
    subtotal_display: str
    remaining_stock: int
    total_sales: float


class SalesTotalResponse(BaseModel):
    """Schema for the accumulated sales report."""
    total_sales: float
    total_sales_display: str
    receipt: str
