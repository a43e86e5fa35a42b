from .config import API_NAME, RESOURCES

# route catalogue served at /api by both adapters
API_INDEX = {
    'products': {
        'GET /api/products': 'List all products (query: onlyActive=true)',
        'GET /api/products/low-stock': 'Low stock alerts (query: threshold=50)',
        'GET /api/products/inventory-value': 'Total inventory value',
        'GET /api/products/by-category': 'Products grouped by category',
        'GET /api/products/:id': 'Get product by id',
        'POST /api/products': 'Add product (body: name, category, price, stock, sku)',
        'PATCH /api/products/:id/stock': 'Update stock (body: qty)',
        'POST /api/products/bulk-discount': 'Bulk discount (body: category, discountPct)',
    },
    'orders': {
        'GET /api/orders': 'List all orders',
        'GET /api/orders/revenue': 'Revenue summary',
        'GET /api/orders/customer/:customerId': 'Orders by customer',
        'GET /api/orders/:id': 'Get order by id',
        'POST /api/orders': 'Place order (body: customerId, items)',
        'PATCH /api/orders/:id/advance': 'Advance order status',
        'POST /api/orders/:id/cancel': 'Cancel order',
    },
    'customers': {
        'GET /api/customers': 'List all customers',
        'GET /api/customers/stats': 'Customer stats',
        'GET /api/customers/tier/:tier': 'Customers by tier',
        'GET /api/customers/country/:country': 'Customers by country',
        'GET /api/customers/:id': 'Get customer by id',
        'POST /api/customers': 'Add customer (body: name, email, country, tier)',
        'PATCH /api/customers/:id': 'Update customer (body: updates)',
        'DELETE /api/customers/:id': 'Delete customer',
    },
}


def root_info():
    return {
        'name': API_NAME,
        'endpoints': {name: f'/api/{name}' for name in RESOURCES},
    }


def docs_index_html(ui_link=None):
    """small landing page for /api-docs"""
    links = ', '.join(f'<a href="/api-docs/spec/{name}">{name}</a>' for name in RESOURCES)
    ui = f'<ul><li><a href="{ui_link}">Swagger UI</a></li></ul>' if ui_link else ''
    return f"""<!DOCTYPE html>
<html>
  <head><title>API Docs</title></head>
  <body>
    <h1>{API_NAME} – OpenAPI docs</h1>
    {ui}
    <p>Specs (JSON): {links}</p>
    <p>API is available at <a href="/api">/api</a>.</p>
  </body>
</html>
"""
