"""
FastAPI front end for the mock retail API.

Same routes as the Flask app; the OpenAPI document is generated from the
pydantic schemas and split per resource under /api-docs/spec/<name>.

Run:  uvicorn mockretail.asgi:app --port 3000
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .discovery import API_INDEX, docs_index_html, root_info
from .models import CustomerPatch, OrderItem
from .openapi import split_spec
from .schemas import (
    BulkDiscount,
    CancelResult,
    CustomerIn,
    CustomerOut,
    CustomerStats,
    CustomerUpdate,
    EnrichedOrderOut,
    ErrorOut,
    InventoryValue,
    OrderIn,
    OrderOut,
    ProductIn,
    ProductOut,
    RevenueSummary,
    StockUpdate,
)
from .store import RetailStore

logger = logging.getLogger(__name__)

NOT_FOUND = {404: {'model': ErrorOut}}
BAD_REQUEST = {400: {'model': ErrorOut}}


def get_store(request: Request) -> RetailStore:
    return request.app.state.store


# ============================================================================
# PRODUCTS
# ============================================================================

products_router = APIRouter(prefix='/api/products', tags=['products'])


@products_router.get('', response_model=list[ProductOut])
def list_products(onlyActive: Optional[str] = None, store: RetailStore = Depends(get_store)):
    return [p.to_dict() for p in store.products.get_all(onlyActive == 'true')]


@products_router.get('/low-stock', response_model=list[ProductOut])
def low_stock(threshold: Optional[str] = None, store: RetailStore = Depends(get_store)):
    try:
        value = int(threshold)
    except (TypeError, ValueError):
        value = 0
    # 0 falls back to the default as well
    value = value or config.LOW_STOCK_THRESHOLD
    return [p.to_dict() for p in store.products.low_stock_alerts(value)]


@products_router.get('/inventory-value', response_model=InventoryValue)
def inventory_value(store: RetailStore = Depends(get_store)):
    return {'total': store.products.inventory_value()}


@products_router.get('/by-category', response_model=dict[str, list[str]])
def by_category(store: RetailStore = Depends(get_store)):
    return store.products.group_by_category()


@products_router.get('/{pid}', response_model=ProductOut, responses=NOT_FOUND)
def get_product(pid: str, store: RetailStore = Depends(get_store)):
    product = store.products.get_by_id(pid)
    if not product:
        raise HTTPException(status_code=404, detail='Product not found')
    return product.to_dict()


@products_router.post(
    '',
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, 409: {'model': ErrorOut}},
)
def create_product(body: ProductIn, store: RetailStore = Depends(get_store)):
    product = store.products.add(**body.model_dump())
    if not product:
        raise HTTPException(status_code=409, detail='SKU already exists')
    return product.to_dict()


@products_router.patch('/{pid}/stock', response_model=ProductOut, responses={**BAD_REQUEST, **NOT_FOUND})
def adjust_stock(pid: str, body: StockUpdate, store: RetailStore = Depends(get_store)):
    product = store.products.update_stock(pid, body.qty)
    if not product:
        raise HTTPException(status_code=404, detail='Product not found')
    return product.to_dict()


@products_router.post('/bulk-discount', response_model=list[ProductOut], responses=BAD_REQUEST)
def bulk_discount(body: BulkDiscount, store: RetailStore = Depends(get_store)):
    return [p.to_dict() for p in store.products.apply_bulk_discount(body.category, body.discountPct)]


# ============================================================================
# ORDERS
# ============================================================================

orders_router = APIRouter(prefix='/api/orders', tags=['orders'])


@orders_router.get('', response_model=list[OrderOut])
def list_orders(store: RetailStore = Depends(get_store)):
    return [o.to_dict() for o in store.orders.get_all()]


@orders_router.get('/revenue', response_model=RevenueSummary)
def revenue(store: RetailStore = Depends(get_store)):
    return store.orders.revenue_summary()


@orders_router.get('/customer/{customer_id}', response_model=list[OrderOut], responses=BAD_REQUEST)
def orders_by_customer(customer_id: int, store: RetailStore = Depends(get_store)):
    return [o.to_dict() for o in store.orders.list_by_customer(customer_id)]


@orders_router.get('/{oid}', response_model=EnrichedOrderOut, responses=NOT_FOUND)
def get_order(oid: str, store: RetailStore = Depends(get_store)):
    order = store.orders.get_by_id(oid)
    if not order:
        raise HTTPException(status_code=404, detail='Order not found')
    return order


@orders_router.post(
    '',
    response_model=OrderOut,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def create_order(body: OrderIn, store: RetailStore = Depends(get_store)):
    items = [OrderItem(product_id=i.productId, qty=i.qty) for i in body.items]
    order = store.orders.place(body.customerId, items)
    if not order:
        raise HTTPException(status_code=404, detail='Customer not found')
    return order.to_dict()


@orders_router.patch('/{oid}/advance', response_model=OrderOut, responses=NOT_FOUND)
def advance_order(oid: str, store: RetailStore = Depends(get_store)):
    order = store.orders.advance(oid)
    if not order:
        raise HTTPException(status_code=404, detail='Order not found or cannot be advanced')
    return order.to_dict()


@orders_router.post('/{oid}/cancel', response_model=CancelResult, responses=BAD_REQUEST)
def cancel_order(oid: str, store: RetailStore = Depends(get_store)):
    if not store.orders.cancel(oid):
        raise HTTPException(status_code=400, detail='Order not found or cannot be cancelled')
    return {'cancelled': True}


# ============================================================================
# CUSTOMERS
# ============================================================================

customers_router = APIRouter(prefix='/api/customers', tags=['customers'])


@customers_router.get('', response_model=list[CustomerOut])
def list_customers(store: RetailStore = Depends(get_store)):
    return [c.to_dict() for c in store.customers.get_all()]


@customers_router.get('/stats', response_model=CustomerStats)
def customer_stats(store: RetailStore = Depends(get_store)):
    return store.customers.stats()


@customers_router.get('/tier/{tier}', response_model=list[CustomerOut])
def customers_by_tier(tier: str, store: RetailStore = Depends(get_store)):
    return [c.to_dict() for c in store.customers.list_by_tier(tier)]


@customers_router.get('/country/{country}', response_model=list[CustomerOut])
def customers_by_country(country: str, store: RetailStore = Depends(get_store)):
    return [c.to_dict() for c in store.customers.list_by_country(country)]


@customers_router.get('/{customer_id}', response_model=CustomerOut, responses={**BAD_REQUEST, **NOT_FOUND})
def get_customer(customer_id: int, store: RetailStore = Depends(get_store)):
    customer = store.customers.get_by_id(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail='Customer not found')
    return customer.to_dict()


@customers_router.post('', response_model=CustomerOut, status_code=status.HTTP_201_CREATED, responses=BAD_REQUEST)
def create_customer(body: CustomerIn, store: RetailStore = Depends(get_store)):
    return store.customers.add(**body.model_dump()).to_dict()


@customers_router.patch('/{customer_id}', response_model=CustomerOut, responses={**BAD_REQUEST, **NOT_FOUND})
def update_customer(customer_id: int, body: CustomerUpdate, store: RetailStore = Depends(get_store)):
    customer = store.customers.update(customer_id, CustomerPatch.from_dict(body.model_dump()))
    if not customer:
        raise HTTPException(status_code=404, detail='Customer not found')
    return customer.to_dict()


@customers_router.delete(
    '/{customer_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def delete_customer(customer_id: int, store: RetailStore = Depends(get_store)):
    if not store.customers.delete(customer_id):
        raise HTTPException(status_code=404, detail='Customer not found')
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# DISCOVERY, OPS, DOCS
# ============================================================================

meta_router = APIRouter()


@meta_router.get('/', include_in_schema=False)
def index():
    return root_info()


@meta_router.get('/api', include_in_schema=False)
def api_index():
    return API_INDEX


@meta_router.get('/health', include_in_schema=False)
def health(store: RetailStore = Depends(get_store)):
    return {
        'status': 'ok',
        'version': config.API_VERSION,
        'counts': store.counts(),
        'timestamp': datetime.now().isoformat(),
    }


@meta_router.post('/debug/reset', include_in_schema=False)
def debug_reset(store: RetailStore = Depends(get_store)):
    store.reset()
    return {'message': 'Data reset', 'counts': store.counts()}


@meta_router.get('/api-docs', include_in_schema=False, response_class=HTMLResponse)
def api_docs():
    return docs_index_html(ui_link='/docs')


@meta_router.get('/api-docs/spec/{name}', include_in_schema=False)
def api_docs_spec(name: str, request: Request):
    if name not in config.RESOURCES:
        raise HTTPException(status_code=404, detail='Unknown spec')
    return split_spec(request.app.openapi(), name)


# ============================================================================
# ERROR HANDLERS
# ============================================================================


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException as {"error": detail}, same shape as the Flask app."""
    http_exc = exc if isinstance(exc, StarletteHTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(status_code=http_exc.status_code, content={'error': http_exc.detail}, headers=http_exc.headers)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed input is a 400, with per-field details."""
    details = []
    if isinstance(exc, RequestValidationError):
        details = [
            {'field': '.'.join(str(loc) for loc in error['loc']), 'message': error['msg']}
            for error in exc.errors()
        ]
    logger.warning(f'Validation error on {request.url.path}: {details}')
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'error': 'Validation error', 'details': details},
    )


def create_app(store: Optional[RetailStore] = None) -> FastAPI:
    app = FastAPI(
        title=config.API_NAME,
        version=config.API_VERSION,
        description=config.API_DESCRIPTION,
        openapi_tags=[{'name': name, 'description': f'{name.capitalize()} API'} for name in config.RESOURCES],
        servers=[{'url': '/', 'description': 'Relative to host'}],
    )
    app.state.store = store or RetailStore()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(meta_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    app.include_router(customers_router)
    return app


app = create_app()
