"""Mock retail API: products, orders, customers over in-memory stores."""
from .customers import CustomerStore
from .models import Customer, CustomerPatch, Order, OrderItem, Product
from .orders import STATUS_FLOW, OrderEngine
from .products import ProductCatalog
from .store import RetailStore

__version__ = '1.0.0'

__all__ = [
    'Customer',
    'CustomerPatch',
    'CustomerStore',
    'Order',
    'OrderEngine',
    'OrderItem',
    'Product',
    'ProductCatalog',
    'RetailStore',
    'STATUS_FLOW',
]
