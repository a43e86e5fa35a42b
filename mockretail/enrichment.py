def format_money(amount):
    return f'${amount:.2f}'


def compute_total(items, catalog):
    """sum of qty * current catalog price; unknown products count as 0"""
    total = 0
    for item in items:
        price = catalog.unit_price(item.product_id)
        if price is not None:
            total += price * item.qty
    return total


def enrich_order(order, customers, catalog):
    """display view of an order: customer name/country, product names, money strings

    read only, nothing on the order or the stores is touched
    """
    customer = customers.get_by_id(order.customer_id)
    items = []
    for item in order.items:
        product = catalog.get_by_id(item.product_id)
        price = product.price if product else 0
        items.append({
            'productId': item.product_id,
            'product': product.name if product else 'Unknown',
            'qty': item.qty,
            'lineTotal': format_money(price * item.qty),
        })
    result = order.to_dict()
    result.update({
        'customer': customer.name if customer else 'Unknown',
        'country': customer.country if customer else '??',
        'items': items,
        'total': format_money(compute_total(order.items, catalog)),
    })
    return result
