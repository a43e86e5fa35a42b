"""
Pydantic request/response schemas for the FastAPI adapter.

Field names are the camelCase wire names; these models also drive the
generated OpenAPI document.
"""
from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class ErrorOut(BaseModel):
    error: str


class ProductOut(BaseModel):
    id: str
    name: str
    category: str
    price: float
    stock: int
    sku: str
    active: bool


class ProductIn(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    stock: StrictInt = Field(..., ge=0)
    sku: str = Field(..., min_length=1)


class StockUpdate(BaseModel):
    qty: StrictInt = Field(..., description='Signed stock delta, stock never drops below 0')


class BulkDiscount(BaseModel):
    category: str = Field(..., min_length=1)
    discountPct: float = Field(..., description='Percentage off, applied as-is (no range check)')


class InventoryValue(BaseModel):
    total: float


class OrderItemSchema(BaseModel):
    productId: str = Field(..., min_length=1)
    qty: StrictInt = Field(..., gt=0)


class OrderIn(BaseModel):
    customerId: int
    items: list[OrderItemSchema]


class OrderOut(BaseModel):
    id: str
    customerId: int
    status: str
    createdAt: str
    items: list[OrderItemSchema]


class EnrichedItem(BaseModel):
    productId: str
    product: str
    qty: int
    lineTotal: str


class EnrichedOrderOut(BaseModel):
    id: str
    customerId: int
    status: str
    createdAt: str
    items: list[EnrichedItem]
    customer: str
    country: str
    total: str


class RevenueSummary(BaseModel):
    total: float
    byStatus: dict[str, int]


class CancelResult(BaseModel):
    cancelled: bool


class CustomerOut(BaseModel):
    id: int
    name: str
    email: str
    country: str
    tier: str
    createdAt: str


class CustomerIn(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    tier: str = Field(..., min_length=1)


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    country: Optional[str] = None
    tier: Optional[str] = None
    createdAt: Optional[str] = None


class CustomerStats(BaseModel):
    total: int
    byTier: dict[str, int]
