import json
from pathlib import Path

import pytest

ORDERS = [
    {
        "id": "o1",
        "customer_id": "c1",
        "customer_name": "Asha Patel",
        "date": "2024-01-01",
        "total_amount": 130.00,
        "amount_paid": 100.00,
        "items": [
            {"product_id": "p1", "product_name": "Milk", "quantity": 2, "unit": "litre",
             "price": 50.00, "total": 100.00},
            {"product_id": "p2", "product_name": "Paneer", "quantity": 1, "unit": "piece",
             "price": 30.00, "total": 30.00},
        ],
    },
    {
        "id": "o2",
        "customer_id": "c2",
        "customer_name": "Bharat Shah",
        "date": "2024-01-01",
        "total_amount": 50.00,
        "items": [
            {"product_id": "p1", "product_name": "Milk", "quantity": 1, "unit": "litre",
             "price": 50.00, "total": 50.00},
        ],
    },
    {
        "id": "o3",
        "customer_id": "c1",
        "customer_name": "Asha Patel",
        "date": "2024-01-02",
        "total_amount": 75.00,
        "amount_paid": None,
        "items": [
            {"product_id": "p1", "product_name": "Milk", "quantity": 1.5, "unit": "litre",
             "price": 50.00, "total": 75.00},
        ],
    },
]

CUSTOMERS = [
    {"id": "c1", "name": "Asha Patel"},
    {"id": "c2", "name": "Bharat Shah"},
]

PRODUCTS = [
    {"id": "p1", "name": "Milk", "unit": "litre"},
    {"id": "p2", "name": "Paneer", "unit": "piece"},
]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "orders.json").write_text(json.dumps(ORDERS), encoding="utf-8")
    (directory / "customers.json").write_text(json.dumps(CUSTOMERS), encoding="utf-8")
    (directory / "products.json").write_text(json.dumps(PRODUCTS), encoding="utf-8")
    return directory
