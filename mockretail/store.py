import logging
from datetime import date

from . import fixtures
from .customers import CustomerStore
from .orders import OrderEngine
from .products import ProductCatalog

logger = logging.getLogger(__name__)


class RetailStore:
    """one customer store, product catalog and order engine wired together"""

    def __init__(self, today=date.today, seed=True):
        self.today = today
        self.reset(seed=seed)

    def reset(self, seed=True):
        self.customers = CustomerStore(fixtures.seed_customers() if seed else [], today=self.today)
        self.products = ProductCatalog(fixtures.seed_products() if seed else [])
        self.orders = OrderEngine(
            self.customers,
            self.products,
            fixtures.seed_orders() if seed else [],
            today=self.today,
        )
        logger.info(
            f'Store loaded: {len(self.customers.get_all())} customers, '
            f'{len(self.products.get_all())} products, {len(self.orders.get_all())} orders'
        )

    def counts(self):
        return {
            'customers': len(self.customers.get_all()),
            'products': len(self.products.get_all()),
            'orders': len(self.orders.get_all()),
        }
