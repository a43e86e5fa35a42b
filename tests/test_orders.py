from datetime import date

import pytest

from mockretail.models import OrderItem
from mockretail.orders import STATUS_FLOW
from mockretail.store import RetailStore


def _items():
    return [OrderItem('P001', 1), OrderItem('P006', 2)]


class TestPlaceOrder:
    def test_place(self, engine):
        order = engine.place(3, _items())

        assert order.id == 'ORD-2026-001'
        assert order.status == 'pending'
        assert order.created_at == '2026-03-14'
        assert order.items == _items()
        assert engine.get_all()[-1] is order

    def test_sequence_per_year(self, engine):
        assert engine.place(3, _items()).id == 'ORD-2026-001'
        assert engine.place(1, _items()).id == 'ORD-2026-002'

    def test_sequence_continues_existing_year(self):
        store = RetailStore(today=lambda: date(2025, 7, 1))
        assert store.orders.place(2, _items()).id == 'ORD-2025-002'

    def test_unknown_customer_rejected(self, engine):
        assert engine.place(99, _items()) is None
        assert len(engine.get_all()) == 5

    def test_unknown_products_tolerated(self, engine):
        order = engine.place(2, [OrderItem('P999', 3), OrderItem('P003', 1)])
        assert order is not None
        assert engine.compute_total(order.items) == pytest.approx(19.99)

    def test_placing_does_not_touch_stock(self, engine, catalog):
        engine.place(3, [OrderItem('P001', 5)])
        assert catalog.get_by_id('P001').stock == 120

    def test_unpriceable_item_leaves_no_order(self, engine):
        with pytest.raises(TypeError):
            engine.place(1, [OrderItem('P001', '2')])
        assert len(engine.get_all()) == 5

    def test_deleted_customer_cannot_order(self, engine, customers):
        customers.delete(5)
        assert engine.place(5, _items()) is None


class TestLifecycle:
    def test_advance_through_flow(self, engine):
        order = engine.place(3, _items())

        seen = [engine.advance(order.id).status for _ in range(3)]
        assert seen == ['confirmed', 'shipped', 'delivered']

        again = engine.advance(order.id)
        assert again is order
        assert again.status == 'delivered'

    def test_advance_unknown(self, engine):
        assert engine.advance('ORD-9999-000') is None

    def test_advance_cancelled_blocked(self, engine):
        assert engine.advance('ORD-2024-004') is None
        assert engine.get_by_id('ORD-2024-004')['status'] == 'cancelled'

    def test_advance_unknown_status_blocked(self, engine):
        order = engine.place(1, _items())
        order.status = 'on_hold'
        assert engine.advance(order.id) is None

    @pytest.mark.parametrize('status', ['pending', 'confirmed'])
    def test_cancel_allowed(self, engine, status):
        order = engine.place(1, _items())
        while order.status != status:
            engine.advance(order.id)

        assert engine.cancel(order.id) is True
        assert order.status == 'cancelled'

    @pytest.mark.parametrize('status', ['shipped', 'delivered'])
    def test_cancel_blocked_after_shipping(self, engine, status):
        order = engine.place(1, _items())
        while order.status != status:
            engine.advance(order.id)

        assert engine.cancel(order.id) is False
        assert order.status == status

    def test_cancel_seeded_shipped(self, engine):
        assert engine.cancel('ORD-2024-002') is False
        assert engine.get_by_id('ORD-2024-002')['status'] == 'shipped'

    def test_cancel_unknown(self, engine):
        assert engine.cancel('ORD-9999-000') is False

    def test_cancelled_is_final(self, engine):
        assert engine.cancel('ORD-2025-001') is True
        assert engine.cancel('ORD-2025-001') is False
        assert engine.advance('ORD-2025-001') is None

    def test_status_flow(self):
        assert STATUS_FLOW == ['pending', 'confirmed', 'shipped', 'delivered']


class TestAggregates:
    def test_list_by_customer(self, engine):
        assert [o.id for o in engine.list_by_customer(1)] == ['ORD-2024-001', 'ORD-2025-001']
        assert engine.list_by_customer(5) == []

    def test_revenue_summary(self, engine):
        summary = engine.revenue_summary()

        assert summary['total'] == pytest.approx(89.99 + 34.99 + 2 * 19.99)
        assert list(summary['byStatus'].items()) == [
            ('delivered', 1),
            ('shipped', 1),
            ('pending', 2),
            ('cancelled', 1),
        ]

    def test_revenue_total_matches_delivered_orders(self, engine):
        engine.advance('ORD-2024-002')
        delivered = [o for o in engine.get_all() if o.status == 'delivered']

        expected = sum(engine.compute_total(o.items) for o in delivered)
        assert engine.revenue_summary()['total'] == pytest.approx(expected)

    def test_revenue_reprices_from_live_catalog(self, engine, catalog):
        before = engine.revenue_summary()['total']

        catalog.apply_bulk_discount('footwear', 10)

        after = engine.revenue_summary()['total']
        assert after == pytest.approx(80.99 + 34.99 + 2 * 19.99)
        assert after < before

    def test_revenue_with_no_delivered_orders(self):
        store = RetailStore(seed=False)
        assert store.orders.revenue_summary() == {'total': 0, 'byStatus': {}}

    def test_compute_total_live_prices(self, engine, catalog):
        items = [OrderItem('P002', 2)]
        assert engine.compute_total(items) == pytest.approx(99.98)
        catalog.apply_bulk_discount('clothing', 20)
        assert engine.compute_total(items) == pytest.approx(79.98)
