import logging
from datetime import date

from .config import ORDER_SEQ_WIDTH
from .enrichment import compute_total, enrich_order
from .models import Order

logger = logging.getLogger(__name__)

STATUS_FLOW = ['pending', 'confirmed', 'shipped', 'delivered']
CANCELLABLE = ['pending', 'confirmed']


class OrderEngine:
    """orders and their lifecycle

    customers and catalog are read-only here; placing an order does not
    touch stock, callers adjust it separately
    """

    def __init__(self, customers, catalog, orders=None, today=date.today):
        self.customers = customers
        self.catalog = catalog
        self._orders = list(orders or [])
        self._today = today

    def _find(self, order_id):
        for o in self._orders:
            if o.id == order_id:
                return o
        return None

    def _next_id(self, year):
        prefix = f'ORD-{year}'
        seq = sum(1 for o in self._orders if o.id.startswith(prefix)) + 1
        return f'{prefix}-{seq:0{ORDER_SEQ_WIDTH}d}'

    def compute_total(self, items):
        return compute_total(items, self.catalog)

    def get_all(self):
        return list(self._orders)

    def get_by_id(self, order_id):
        order = self._find(order_id)
        if order is None:
            logger.info(f'Order "{order_id}" not found')
            return None
        return enrich_order(order, self.customers, self.catalog)

    def place(self, customer_id, items):
        if not self.customers.exists(customer_id):
            logger.warning(f'Cannot place order - customer #{customer_id} not found')
            return None
        today = self._today()
        order = Order(
            id=self._next_id(today.year),
            customer_id=customer_id,
            status='pending',
            created_at=today.isoformat(),
            items=list(items),
        )
        # priced before storing so a bad item never leaves a half-placed order
        total = self.compute_total(order.items)
        self._orders.append(order)
        logger.info(f'Order placed: {order.id} | total {total:.2f}')
        return order

    def advance(self, order_id):
        order = self._find(order_id)
        if order is None:
            logger.warning(f'Cannot advance - order "{order_id}" not found')
            return None
        if order.status not in STATUS_FLOW:
            logger.warning(f'Order "{order_id}" cannot be advanced (status: {order.status})')
            return None
        idx = STATUS_FLOW.index(order.status)
        if idx == len(STATUS_FLOW) - 1:
            # already delivered, nothing to do
            return order
        previous = order.status
        order.status = STATUS_FLOW[idx + 1]
        logger.info(f'Order {order_id}: {previous} -> {order.status}')
        return order

    def cancel(self, order_id):
        order = self._find(order_id)
        if order is None:
            logger.warning(f'Cannot cancel - order "{order_id}" not found')
            return False
        if order.status not in CANCELLABLE:
            logger.warning(f'Cannot cancel - order "{order_id}" is {order.status}')
            return False
        order.status = 'cancelled'
        logger.info(f'Order "{order_id}" cancelled')
        return True

    def list_by_customer(self, customer_id):
        return [o for o in self._orders if o.customer_id == customer_id]

    def revenue_summary(self):
        # totals are repriced from the live catalog on every call
        total = sum(self.compute_total(o.items) for o in self._orders if o.status == 'delivered')
        by_status = {}
        for o in self._orders:
            by_status[o.status] = by_status.get(o.status, 0) + 1
        return {'total': total, 'byStatus': by_status}
