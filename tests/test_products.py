import pytest

from mockretail.products import ProductCatalog, apply_discount

SEED_INVENTORY_VALUE = 35411.35


class TestProductCatalog:
    def test_get_all(self, catalog):
        assert len(catalog.get_all()) == 10
        active = catalog.get_all(only_active=True)
        assert [p.id for p in active] == [f'P00{i}' for i in range(1, 10)]

    def test_get_by_id(self, catalog):
        assert catalog.get_by_id('P005').name == 'Wireless Earbuds'
        assert catalog.get_by_id('P999') is None

    def test_add(self, catalog):
        p = catalog.add(name='Canvas Tote Bag', category='accessories', price=17.99, stock=110, sku='AC-011')

        assert p.id == 'P011'
        assert p.active is True
        assert catalog.get_by_id('P011') is p

    def test_add_duplicate_sku_rejected(self, catalog):
        assert catalog.add(name='Copy', category='footwear', price=1.0, stock=1, sku='FW-001') is None
        assert len(catalog.get_all()) == 10

    def test_ids_come_from_counter(self):
        catalog = ProductCatalog()
        assert catalog.add(name='a', category='c', price=1.0, stock=1, sku='A').id == 'P001'
        assert catalog.add(name='b', category='c', price=1.0, stock=1, sku='B').id == 'P002'

    def test_update_stock_restock(self, catalog):
        assert catalog.update_stock('P003', 50).stock == 250

    def test_update_stock_clamps_at_zero(self, catalog):
        assert catalog.update_stock('P001', -1000).stock == 0

    def test_update_stock_unknown(self, catalog):
        assert catalog.update_stock('P999', 5) is None

    def test_bulk_discount(self, catalog):
        before = {p.id: p.price for p in catalog.get_all()}

        affected = catalog.apply_bulk_discount('clothing', 20)

        assert [p.id for p in affected] == ['P002', 'P009']
        assert catalog.get_by_id('P002').price == 39.99
        assert catalog.get_by_id('P009').price == 18.39
        for p in catalog.get_all():
            if p.category != 'clothing':
                assert p.price == before[p.id]

    def test_bulk_discount_skips_inactive(self, catalog):
        assert catalog.apply_bulk_discount('sports', 50) == [catalog.get_by_id('P004')]
        assert catalog.get_by_id('P010').price == 18.99

    def test_bulk_discount_percentage_not_validated(self, catalog):
        catalog.apply_bulk_discount('home', -10)
        assert catalog.get_by_id('P006').price == round(24.99 * 1.1, 2)

        catalog.apply_bulk_discount('beauty', 150)
        assert catalog.get_by_id('P008').price < 0

    def test_apply_discount_rounds(self):
        assert apply_discount(10.0, 33) == 6.7
        assert apply_discount(19.99, 0) == 19.99

    def test_low_stock_alerts(self, catalog):
        assert [p.id for p in catalog.low_stock_alerts()] == ['P005', 'P009']
        assert [p.id for p in catalog.low_stock_alerts(60)] == ['P004', 'P005', 'P009']

    def test_inventory_value(self, catalog):
        assert catalog.inventory_value() == pytest.approx(SEED_INVENTORY_VALUE)

    def test_inventory_value_after_restock(self, catalog):
        catalog.update_stock('P003', 50)
        assert catalog.get_by_id('P003').stock == 250
        assert catalog.inventory_value() == pytest.approx(SEED_INVENTORY_VALUE + 19.99 * 50)

    def test_group_by_category(self, catalog):
        grouped = catalog.group_by_category()
        assert list(grouped) == ['footwear', 'clothing', 'accessories', 'sports', 'electronics', 'home', 'beauty']
        assert grouped['clothing'] == ['Slim-Fit Denim Jeans', 'Vintage Cap']
        assert grouped['sports'] == ['Yoga Mat']

    def test_unit_price(self, catalog):
        assert catalog.unit_price('P003') == 19.99
        assert catalog.unit_price('nope') is None
