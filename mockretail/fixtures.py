from .models import Customer, Order, OrderItem, Product

# seed data, every store reset starts from these


def seed_customers():
    return [
        Customer(1, 'Alice Dupont', 'alice@acme.com', 'FR', 'gold', '2023-01-15'),
        Customer(2, 'Bob Nguyen', 'bob@orbit.io', 'US', 'silver', '2023-03-22'),
        Customer(3, 'Clara Schmidt', 'clara@zenith.de', 'DE', 'gold', '2023-06-01'),
        Customer(4, 'David Martin', 'david@apex.fr', 'FR', 'bronze', '2024-01-10'),
        Customer(5, 'Eva Lindstrom', 'eva@nordic.se', 'SE', 'silver', '2024-02-28'),
    ]


def seed_products():
    return [
        Product('P001', 'Running Shoes', 'footwear', 89.99, 120, 'FW-001'),
        Product('P002', 'Slim-Fit Denim Jeans', 'clothing', 49.99, 85, 'CL-002'),
        Product('P003', 'Stainless Water Bottle', 'accessories', 19.99, 200, 'AC-003'),
        Product('P004', 'Yoga Mat', 'sports', 34.99, 60, 'SP-004'),
        Product('P005', 'Wireless Earbuds', 'electronics', 129.99, 45, 'EL-005'),
        Product('P006', 'Scented Candle Set', 'home', 24.99, 90, 'HM-006'),
        Product('P007', 'Leather Wallet', 'accessories', 39.99, 75, 'AC-007'),
        Product('P008', 'Sunscreen SPF 50', 'beauty', 14.99, 150, 'BT-008'),
        Product('P009', 'Vintage Cap', 'clothing', 22.99, 40, 'CL-009'),
        # retired, stays in the catalog but is never counted
        Product('P010', 'Foam Roller (Retired)', 'sports', 18.99, 0, 'SP-010', active=False),
    ]


def seed_orders():
    return [
        Order('ORD-2024-001', 1, 'delivered', '2024-02-10', [
            OrderItem('P001', 1),
            OrderItem('P004', 1),
            OrderItem('P003', 2),
        ]),
        Order('ORD-2024-002', 2, 'shipped', '2024-04-22', [
            OrderItem('P005', 1),
            OrderItem('P007', 1),
        ]),
        Order('ORD-2024-003', 3, 'pending', '2024-06-15', [
            OrderItem('P002', 2),
            OrderItem('P009', 1),
            OrderItem('P006', 3),
        ]),
        Order('ORD-2024-004', 4, 'cancelled', '2024-08-30', [
            OrderItem('P008', 4),
            OrderItem('P003', 1),
        ]),
        Order('ORD-2025-001', 1, 'pending', '2025-01-05', [
            OrderItem('P005', 1),
            OrderItem('P002', 1),
            OrderItem('P008', 2),
        ]),
    ]
