"""
Flask front end for the mock retail API.

Routes only translate HTTP to store calls: store sentinels (None / False)
become 404 / 409 / 400 responses here, the stores themselves never raise.
"""
import json
import logging
import os
from datetime import datetime

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from . import config
from .discovery import API_INDEX, docs_index_html, root_info
from .models import CustomerPatch, OrderItem
from .store import RetailStore

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('mockretail.audit')


def log_action(action, data=None):
    # audit trail for every mutating request
    audit_logger.info(f'{action} {data or {}} ip={request.remote_addr}')


def _parse_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_item(item):
    if not isinstance(item, dict) or not item.get('productId'):
        return False
    qty = item.get('qty')
    return _is_int(qty) and qty > 0


def load_spec(name, openapi_dir=None):
    path = os.path.join(openapi_dir or config.OPENAPI_DIR, f'{name}.json')
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError):
        return None


def create_app(store=None, openapi_dir=None):
    app = Flask(__name__)
    app.json.sort_keys = False
    store = store or RetailStore()
    app.extensions['retail_store'] = store
    openapi_dir = openapi_dir or config.OPENAPI_DIR

    # ============== ROUTES ==============

    @app.route('/')
    def index():
        return jsonify(root_info())

    @app.route('/api')
    def api_index():
        return jsonify(API_INDEX)

    @app.route('/health')
    def health():
        return jsonify({
            'status': 'ok',
            'version': config.API_VERSION,
            'counts': store.counts(),
            'timestamp': datetime.now().isoformat()
        })

    @app.route('/debug/reset', methods=['POST'])
    def debug_reset():
        # for testing - puts the fixture data back
        store.reset()
        log_action('debug_reset')
        return jsonify({'message': 'Data reset', 'counts': store.counts()})

    # ---------- PRODUCTS ----------

    @app.route('/api/products', methods=['GET'])
    def list_products():
        only_active = request.args.get('onlyActive') == 'true'
        return jsonify([p.to_dict() for p in store.products.get_all(only_active)])

    @app.route('/api/products/low-stock', methods=['GET'])
    def low_stock():
        # 0 or garbage falls back to the default, same as the node version
        threshold = _parse_int(request.args.get('threshold')) or config.LOW_STOCK_THRESHOLD
        return jsonify([p.to_dict() for p in store.products.low_stock_alerts(threshold)])

    @app.route('/api/products/inventory-value', methods=['GET'])
    def inventory_value():
        return jsonify({'total': store.products.inventory_value()})

    @app.route('/api/products/by-category', methods=['GET'])
    def by_category():
        return jsonify(store.products.group_by_category())

    @app.route('/api/products/<pid>', methods=['GET'])
    def get_product(pid):
        product = store.products.get_by_id(pid)
        if not product:
            return jsonify({'error': 'Product not found'}), 404
        return jsonify(product.to_dict())

    @app.route('/api/products', methods=['POST'])
    def create_product():
        data = request.get_json(silent=True) or {}
        name, category, sku = data.get('name'), data.get('category'), data.get('sku')
        price, stock = data.get('price'), data.get('stock')
        if not name or not category or price is None or stock is None or not sku:
            return jsonify({'error': 'Missing required fields: name, category, price, stock, sku'}), 400
        if not _is_number(price) or price < 0 or not _is_int(stock) or stock < 0:
            return jsonify({'error': 'price must be a non-negative number and stock a non-negative integer'}), 400
        price = float(price)

        product = store.products.add(name=name, category=category, price=price, stock=stock, sku=sku)
        if not product:
            return jsonify({'error': 'SKU already exists'}), 409

        log_action('create_product', {'product_id': product.id})
        return jsonify(product.to_dict()), 201

    @app.route('/api/products/<pid>/stock', methods=['PATCH'])
    def adjust_stock(pid):
        data = request.get_json(silent=True) or {}
        qty = data.get('qty')
        if not _is_int(qty):
            return jsonify({'error': 'Body must include numeric qty'}), 400

        product = store.products.update_stock(pid, qty)
        if not product:
            return jsonify({'error': 'Product not found'}), 404

        log_action('adjust_stock', {'product_id': pid, 'qty': qty})
        return jsonify(product.to_dict())

    @app.route('/api/products/bulk-discount', methods=['POST'])
    def bulk_discount():
        data = request.get_json(silent=True) or {}
        category, pct = data.get('category'), data.get('discountPct')
        if not category or pct is None:
            return jsonify({'error': 'Missing required fields: category, discountPct'}), 400
        try:
            pct = float(pct)
        except (TypeError, ValueError):
            return jsonify({'error': 'discountPct must be a number'}), 400

        targets = store.products.apply_bulk_discount(category, pct)
        log_action('bulk_discount', {'category': category, 'pct': pct, 'count': len(targets)})
        return jsonify([p.to_dict() for p in targets])

    # ---------- ORDERS ----------

    @app.route('/api/orders', methods=['GET'])
    def list_orders():
        return jsonify([o.to_dict() for o in store.orders.get_all()])

    @app.route('/api/orders/revenue', methods=['GET'])
    def revenue():
        return jsonify(store.orders.revenue_summary())

    @app.route('/api/orders/customer/<customer_id>', methods=['GET'])
    def orders_by_customer(customer_id):
        cid = _parse_int(customer_id)
        if cid is None:
            return jsonify({'error': 'Invalid customerId'}), 400
        return jsonify([o.to_dict() for o in store.orders.list_by_customer(cid)])

    @app.route('/api/orders/<oid>', methods=['GET'])
    def get_order(oid):
        order = store.orders.get_by_id(oid)
        if not order:
            return jsonify({'error': 'Order not found'}), 404
        return jsonify(order)

    @app.route('/api/orders', methods=['POST'])
    def create_order():
        data = request.get_json(silent=True) or {}
        customer_id, items = data.get('customerId'), data.get('items')
        if customer_id is None or not isinstance(items, list):
            return jsonify({'error': 'Missing required fields: customerId, items'}), 400

        cid = _parse_int(customer_id)
        if cid is None:
            return jsonify({'error': 'Invalid customerId'}), 400
        if not all(_is_item(i) for i in items):
            return jsonify({'error': 'Each item needs productId and a positive integer qty'}), 400
        items = [OrderItem.from_dict(i) for i in items]

        order = store.orders.place(cid, items)
        if not order:
            return jsonify({'error': 'Customer not found'}), 404

        log_action('create_order', {'order_id': order.id, 'customer_id': cid})
        return jsonify(order.to_dict()), 201

    @app.route('/api/orders/<oid>/advance', methods=['PATCH'])
    def advance_order(oid):
        order = store.orders.advance(oid)
        if not order:
            return jsonify({'error': 'Order not found or cannot be advanced'}), 404
        log_action('advance_order', {'order_id': oid, 'status': order.status})
        return jsonify(order.to_dict())

    @app.route('/api/orders/<oid>/cancel', methods=['POST'])
    def cancel_order(oid):
        if not store.orders.cancel(oid):
            return jsonify({'error': 'Order not found or cannot be cancelled'}), 400
        log_action('cancel_order', {'order_id': oid})
        return jsonify({'cancelled': True})

    # ---------- CUSTOMERS ----------

    @app.route('/api/customers', methods=['GET'])
    def list_customers():
        return jsonify([c.to_dict() for c in store.customers.get_all()])

    @app.route('/api/customers/stats', methods=['GET'])
    def customer_stats():
        return jsonify(store.customers.stats())

    @app.route('/api/customers/tier/<tier>', methods=['GET'])
    def customers_by_tier(tier):
        return jsonify([c.to_dict() for c in store.customers.list_by_tier(tier)])

    @app.route('/api/customers/country/<country>', methods=['GET'])
    def customers_by_country(country):
        return jsonify([c.to_dict() for c in store.customers.list_by_country(country)])

    @app.route('/api/customers/<customer_id>', methods=['GET'])
    def get_customer(customer_id):
        cid = _parse_int(customer_id)
        if cid is None:
            return jsonify({'error': 'Invalid customer id'}), 400
        customer = store.customers.get_by_id(cid)
        if not customer:
            return jsonify({'error': 'Customer not found'}), 404
        return jsonify(customer.to_dict())

    @app.route('/api/customers', methods=['POST'])
    def create_customer():
        data = request.get_json(silent=True) or {}
        fields = {k: data.get(k) for k in ('name', 'email', 'country', 'tier')}
        if not all(fields.values()):
            return jsonify({'error': 'Missing required fields: name, email, country, tier'}), 400

        customer = store.customers.add(**fields)
        log_action('create_customer', {'customer_id': customer.id})
        return jsonify(customer.to_dict()), 201

    @app.route('/api/customers/<customer_id>', methods=['PATCH'])
    def update_customer(customer_id):
        cid = _parse_int(customer_id)
        if cid is None:
            return jsonify({'error': 'Invalid customer id'}), 400
        data = request.get_json(silent=True) or {}
        customer = store.customers.update(cid, CustomerPatch.from_dict(data))
        if not customer:
            return jsonify({'error': 'Customer not found'}), 404
        log_action('update_customer', {'customer_id': cid})
        return jsonify(customer.to_dict())

    @app.route('/api/customers/<customer_id>', methods=['DELETE'])
    def delete_customer(customer_id):
        cid = _parse_int(customer_id)
        if cid is None:
            return jsonify({'error': 'Invalid customer id'}), 400
        if not store.customers.delete(cid):
            return jsonify({'error': 'Customer not found'}), 404
        log_action('delete_customer', {'customer_id': cid})
        return '', 204

    # ---------- DOCS ----------

    @app.route('/api-docs', methods=['GET'])
    def api_docs():
        return docs_index_html()

    @app.route('/api-docs/spec/<name>', methods=['GET'])
    def api_docs_spec(name):
        if name not in config.RESOURCES:
            return jsonify({'error': 'Unknown spec'}), 404
        spec = load_spec(name, openapi_dir)
        if spec is None:
            return jsonify({'error': 'Spec not generated; run python -m mockretail.openapi generate'}), 503
        return jsonify(spec)

    # ============== ERROR HANDLERS ==============

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.description}), e.code
        # in debug mode, let it bubble up
        if app.debug:
            raise e
        logger.exception(f'Unhandled error on {request.path}')
        return jsonify({'error': 'An unexpected error occurred'}), 500

    return app
