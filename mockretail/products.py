import logging

from .config import LOW_STOCK_THRESHOLD, PRODUCT_SEQ_WIDTH
from .models import Product

logger = logging.getLogger(__name__)


def apply_discount(price, pct):
    # no range check on pct: >100 goes negative, <0 is a markup
    return round(price * (1 - pct / 100), 2)


def _seq(product_id):
    try:
        return int(product_id[1:])
    except ValueError:
        return 0


class ProductCatalog:
    """products, stock and pricing

    skus are unique across the catalog; ids are P### from a counter
    """

    def __init__(self, products=None):
        self._products = list(products or [])
        self._next_seq = max((_seq(p.id) for p in self._products), default=0) + 1

    def _find(self, product_id):
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def _active(self):
        return [p for p in self._products if p.active]

    def get_all(self, only_active=False):
        if only_active:
            return self._active()
        return list(self._products)

    def get_by_id(self, product_id):
        product = self._find(product_id)
        if product is None:
            logger.info(f'Product "{product_id}" not found')
        return product

    def unit_price(self, product_id):
        """current price, None for unknown ids"""
        product = self._find(product_id)
        return product.price if product else None

    def add(self, name, category, price, stock, sku, active=True):
        if any(p.sku == sku for p in self._products):
            logger.warning(f'SKU "{sku}" already exists')
            return None
        product = Product(
            id=f'P{self._next_seq:0{PRODUCT_SEQ_WIDTH}d}',
            name=name,
            category=category,
            price=price,
            stock=stock,
            sku=sku,
            active=active,
        )
        self._next_seq += 1
        self._products.append(product)
        logger.info(f'Product added: {product.id} {product.name}')
        return product

    def update_stock(self, product_id, qty):
        product = self._find(product_id)
        if product is None:
            logger.warning(f'Cannot update stock - product "{product_id}" not found')
            return None
        previous = product.stock
        product.stock = max(0, product.stock + qty)
        logger.info(f'Stock updated for "{product.name}": {previous} -> {product.stock}')
        return product

    def apply_bulk_discount(self, category, pct):
        targets = [p for p in self._active() if p.category == category]
        for p in targets:
            original = p.price
            p.price = apply_discount(p.price, pct)
            logger.info(f'{pct}% off "{p.name}": {original} -> {p.price}')
        return targets

    def low_stock_alerts(self, threshold=LOW_STOCK_THRESHOLD):
        return [p for p in self._active() if p.stock <= threshold]

    def inventory_value(self):
        return sum(p.price * p.stock for p in self._active())

    def group_by_category(self):
        grouped = {}
        for p in self._active():
            grouped.setdefault(p.category, []).append(p.name)
        return grouped
