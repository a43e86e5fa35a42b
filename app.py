"""
Mock Retail API - Flask server
Products, orders, customers over in-memory stores seeded with fixture data.

The FastAPI flavour of the same API lives in mockretail.asgi.
Per-resource OpenAPI specs: python -m mockretail.openapi generate
"""
import logging

from mockretail import config
from mockretail.flask_app import create_app

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

app = create_app()

# ============== STARTUP ==============

if __name__ == '__main__':
    store = app.extensions['retail_store']
    counts = store.counts()
    print("=" * 50)
    print(f"{config.API_NAME} v{config.API_VERSION}")
    print("=" * 50)
    print(f"Loaded {counts['products']} products")
    print(f"Loaded {counts['customers']} customers")
    print(f"Loaded {counts['orders']} orders")
    print(f"Starting server on http://localhost:{config.PORT}")
    print("=" * 50)
    if config.DEBUG:
        print("WARNING: Debug mode enabled - not for production use!")
        print("=" * 50)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
