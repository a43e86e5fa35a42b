import logging
from datetime import date

from .models import Customer, CustomerPatch

logger = logging.getLogger(__name__)


class CustomerStore:
    """customer records plus tier/country lookups

    ids come from a counter so a delete + add never hands out an old id
    """

    def __init__(self, customers=None, today=date.today):
        self._customers = list(customers or [])
        self._today = today
        self._next_id = max((c.id for c in self._customers), default=0) + 1

    def _find(self, customer_id):
        for c in self._customers:
            if c.id == customer_id:
                return c
        return None

    def get_all(self):
        return list(self._customers)

    def get_by_id(self, customer_id):
        customer = self._find(customer_id)
        if customer is None:
            logger.info(f"Customer #{customer_id} not found")
        return customer

    def exists(self, customer_id):
        return self._find(customer_id) is not None

    def add(self, name, email, country, tier, created_at=None):
        customer = Customer(
            id=self._next_id,
            name=name,
            email=email,
            country=country,
            tier=tier,
            created_at=created_at or self._today().isoformat(),
        )
        self._next_id += 1
        self._customers.append(customer)
        logger.info(f"Customer added: #{customer.id} {customer.name}")
        return customer

    def update(self, customer_id, patch: CustomerPatch):
        customer = self._find(customer_id)
        if customer is None:
            logger.warning(f"Cannot update - customer #{customer_id} not found")
            return None
        for key, value in patch.changes().items():
            setattr(customer, key, value)
        logger.info(f"Customer #{customer_id} updated")
        return customer

    def delete(self, customer_id):
        customer = self._find(customer_id)
        if customer is None:
            logger.warning(f"Cannot delete - customer #{customer_id} not found")
            return False
        self._customers.remove(customer)
        logger.info(f"Customer #{customer_id} deleted")
        return True

    def list_by_tier(self, tier):
        return [c for c in self._customers if c.tier == tier]

    def list_by_country(self, country):
        return [c for c in self._customers if c.country == country]

    def stats(self):
        by_tier = {}
        for c in self._customers:
            by_tier[c.tier] = by_tier.get(c.tier, 0) + 1
        return {'total': len(self._customers), 'byTier': by_tier}
