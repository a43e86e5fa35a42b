import os

# ============== CONFIGURATION ==============
# env overrides for deploys, defaults are fine for local dev
API_NAME = 'Mock Retail API'
API_VERSION = '1.0.0'
API_DESCRIPTION = 'Products, orders, customers API'

HOST = os.environ.get('HOST', '0.0.0.0')
PORT = int(os.environ.get('PORT', 3000))
DEBUG = os.environ.get('DEBUG', '').lower() in ('1', 'true', 'yes')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# generated per-resource specs live here, see mockretail.openapi
OPENAPI_DIR = os.environ.get('OPENAPI_DIR', 'openapi')
RESOURCES = ('products', 'orders', 'customers')

LOW_STOCK_THRESHOLD = 50
PRODUCT_SEQ_WIDTH = 3
ORDER_SEQ_WIDTH = 3
