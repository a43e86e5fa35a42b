"""
Domain records for the retail stores.

Records are plain dataclasses; ``to_dict`` renders the camelCase shape
used on the wire by both HTTP adapters.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Literal, Optional


Tier = Literal['bronze', 'silver', 'gold']
OrderStatus = Literal['pending', 'confirmed', 'shipped', 'delivered', 'cancelled']


@dataclass
class Customer:
    id: int
    name: str
    email: str
    country: str
    tier: Tier
    created_at: str

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'country': self.country,
            'tier': self.tier,
            'createdAt': self.created_at,
        }


@dataclass
class CustomerPatch:
    """partial update, None means 'leave as is'"""

    name: Optional[str] = None
    email: Optional[str] = None
    country: Optional[str] = None
    tier: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'CustomerPatch':
        # unknown keys are ignored, same as the HTTP schema
        wire = {'created_at': 'createdAt'}
        return cls(**{f.name: data.get(wire.get(f.name, f.name)) for f in fields(cls)})

    def changes(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class Product:
    id: str
    name: str
    category: str
    price: float
    stock: int
    sku: str
    active: bool = True

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'price': self.price,
            'stock': self.stock,
            'sku': self.sku,
            'active': self.active,
        }


@dataclass
class OrderItem:
    product_id: str
    qty: int

    @classmethod
    def from_dict(cls, data: dict) -> 'OrderItem':
        return cls(product_id=data['productId'], qty=data['qty'])

    def to_dict(self) -> dict:
        return {'productId': self.product_id, 'qty': self.qty}


@dataclass
class Order:
    id: str
    customer_id: int
    status: OrderStatus
    created_at: str
    items: list[OrderItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'customerId': self.customer_id,
            'status': self.status,
            'createdAt': self.created_at,
            'items': [item.to_dict() for item in self.items],
        }
