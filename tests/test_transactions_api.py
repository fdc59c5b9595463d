import pytest


@pytest.fixture
def products(make_product):
    return [
        make_product(name="Café molido 500g", price="145.00"),
        make_product(name="Té negro 1kg", price="210.00"),
    ]


def test_create_invoice_computes_totals_and_numbers(client, products):
    body = {
        "transaction": {
            "customer_name": "Cliente mostrador",
            "discount": "5.00",
            "tax": "18.00",
            "total": "1.00",
        },
        "items": [
            {"product_id": products[0]["id"], "quantity": 2, "total": "999.00"},
            {"product_id": products[1]["id"], "quantity": 1, "price": "200.00"},
        ],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 201, response.text
    invoice = response.json()
    assert invoice["transaction_number"] == "INV-001"
    assert invoice["status"] == "completed"
    assert invoice["subtotal"] == "490.00"
    assert invoice["discount"] == "5.00"
    assert invoice["tax"] == "18.00"
    assert invoice["total"] == "503.00"

    first, second = invoice["items"]
    assert first["line_number"] == 1
    assert first["product_name"] == "Café molido 500g"
    assert first["price"] == "145.00"
    assert first["total"] == "290.00"
    assert second["line_number"] == 2
    assert second["price"] == "200.00"
    assert second["total"] == "200.00"


def test_invoice_numbers_are_sequential(make_transaction, products):
    numbers = [
        make_transaction([{"product_id": products[0]["id"], "quantity": 1}])["transaction_number"]
        for _ in range(3)
    ]
    assert numbers == ["INV-001", "INV-002", "INV-003"]


def test_customer_id_fills_customer_name(client, make_customer, products):
    customer = make_customer(name="Restaurante Ayşe")
    body = {
        "transaction": {"customer_id": customer["id"]},
        "items": [{"product_id": products[0]["id"], "quantity": 1}],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 201
    assert response.json()["customer_id"] == customer["id"]
    assert response.json()["customer_name"] == "Restaurante Ayşe"


def test_unknown_customer_is_not_found(client, products):
    body = {
        "transaction": {"customer_id": "missing"},
        "items": [{"product_id": products[0]["id"], "quantity": 1}],
    }
    response = client.post("/api/transactions", json=body)
    assert response.status_code == 404
    assert response.json()["message"] == "Customer not found"


def test_customer_name_is_required(client, products):
    body = {
        "transaction": {"customer_name": "  "},
        "items": [{"product_id": products[0]["id"], "quantity": 1}],
    }
    response = client.post("/api/transactions", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "Customer name is required"


def test_invoice_needs_at_least_one_item(client):
    body = {"transaction": {"customer_name": "Cliente"}, "items": []}

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid transaction data"
    assert response.json()["success"] is False


def test_item_quantity_must_be_positive(client, products):
    body = {
        "transaction": {"customer_name": "Cliente"},
        "items": [{"product_id": products[0]["id"], "quantity": 0}],
    }
    assert client.post("/api/transactions", json=body).status_code == 400


def test_unknown_product_is_not_found_and_nothing_is_saved(client, products):
    body = {
        "transaction": {"customer_name": "Cliente"},
        "items": [
            {"product_id": products[0]["id"], "quantity": 1},
            {"product_id": "missing", "quantity": 1},
        ],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 404
    assert response.json()["message"] == "Product missing not found"
    assert client.get("/api/transactions").json() == []


def test_discount_larger_than_invoice_is_rejected(client, products):
    body = {
        "transaction": {"customer_name": "Cliente", "discount": "1000.00"},
        "items": [{"product_id": products[0]["id"], "quantity": 1}],
    }
    response = client.post("/api/transactions", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "Discount cannot exceed the invoice amount"


def test_list_transactions_paginates_newest_first(client, make_transaction, products):
    for _ in range(3):
        make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    page = client.get("/api/transactions", params={"limit": 2}).json()
    assert [t["transaction_number"] for t in page] == ["INV-003", "INV-002"]
    assert "items" not in page[0]

    rest = client.get("/api/transactions", params={"limit": 2, "offset": 2}).json()
    assert [t["transaction_number"] for t in rest] == ["INV-001"]


def test_list_transactions_rejects_invalid_paging(client):
    assert client.get("/api/transactions", params={"limit": 0}).status_code == 400
    assert client.get("/api/transactions", params={"offset": -1}).status_code == 400
    assert client.get("/api/transactions", params={"limit": 1000}).status_code == 400


def test_search_transactions_by_number(client, make_transaction, products):
    for _ in range(2):
        make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    found = client.get("/api/transactions", params={"search": "inv-002"}).json()
    assert [t["transaction_number"] for t in found] == ["INV-002"]


def test_get_transaction_detail(client, make_transaction, products):
    invoice = make_transaction([{"product_id": products[1]["id"], "quantity": 3}])

    response = client.get(f"/api/transactions/{invoice['id']}")

    assert response.status_code == 200
    detail = response.json()
    assert detail["subtotal"] == "630.00"
    assert [item["quantity"] for item in detail["items"]] == [3]

    assert client.get("/api/transactions/missing").status_code == 404


def test_update_status(client, make_transaction, products):
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(f"/api/transactions/{invoice['id']}", json={"status": "cancelled"})

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"
    assert response.json()["total"] == "145.00"

    invalid = client.put(f"/api/transactions/{invoice['id']}", json={"status": "refunded"})
    assert invalid.status_code == 400


def test_update_discount_recomputes_total(client, make_transaction, products):
    invoice = make_transaction(
        [{"product_id": products[0]["id"], "quantity": 2}],
        tax="10.00",
    )
    assert invoice["total"] == "300.00"

    response = client.put(f"/api/transactions/{invoice['id']}", json={"discount": "40.00"})

    assert response.status_code == 200
    assert response.json()["discount"] == "40.00"
    assert response.json()["tax"] == "10.00"
    assert response.json()["total"] == "260.00"

    too_much = client.put(f"/api/transactions/{invoice['id']}", json={"discount": "500.00"})
    assert too_much.status_code == 400


def test_sale_does_not_change_stock(client, make_transaction, products):
    make_transaction([{"product_id": products[0]["id"], "quantity": 5}])

    product = client.get(f"/api/products/{products[0]['id']}").json()
    assert product["quantity"] == 20


@pytest.mark.parametrize("item, header", [
    ({"quantity": 10 ** 30}, {}),
    ({"quantity": 1, "price": "1e30"}, {}),
    ({"quantity": 1, "price": "123456789012.00"}, {}),
    ({"quantity": 1}, {"discount": "1e30"}),
    ({"quantity": 1}, {"tax": "100000000.00"}),
])
def test_out_of_range_invoice_values_are_rejected(client, products, item, header):
    body = {
        "transaction": {"customer_name": "Cliente", **header},
        "items": [{"product_id": products[0]["id"], **item}],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid transaction data"
    assert client.get("/api/transactions").json() == []


def test_invoice_total_larger_than_column_is_rejected(client, products):
    body = {
        "transaction": {"customer_name": "Cliente"},
        "items": [{"product_id": products[0]["id"], "quantity": 2, "price": "99999999.99"}],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 400
    assert response.json()["message"] == "Invoice amount exceeds 99999999.99"
    assert client.get("/api/transactions").json() == []


def test_update_rejects_out_of_range_tax(client, make_transaction, products):
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(f"/api/transactions/{invoice['id']}", json={"tax": "1e30"})

    assert response.status_code == 400
    assert client.get(f"/api/transactions/{invoice['id']}").json()["tax"] == "0.00"


def test_update_customer_fills_name_from_customer(client, make_customer, make_transaction, products):
    customer = make_customer(name="Nuevo")
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(f"/api/transactions/{invoice['id']}", json={"customer_id": customer["id"]})

    assert response.status_code == 200
    assert response.json()["customer_id"] == customer["id"]
    assert response.json()["customer_name"] == "Nuevo"


def test_update_customer_with_blank_name_fills_it(client, make_customer, make_transaction, products):
    customer = make_customer(name="Nuevo")
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(
        f"/api/transactions/{invoice['id']}",
        json={"customer_id": customer["id"], "customer_name": ""},
    )

    assert response.status_code == 200
    assert response.json()["customer_name"] == "Nuevo"


def test_update_blank_name_without_customer_is_rejected(client, make_transaction, products):
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(f"/api/transactions/{invoice['id']}", json={"customer_name": ""})

    assert response.status_code == 400
    assert client.get(f"/api/transactions/{invoice['id']}").json()["customer_name"] == "Cliente mostrador"


def test_update_unknown_customer_is_not_found(client, make_transaction, products):
    invoice = make_transaction([{"product_id": products[0]["id"], "quantity": 1}])

    response = client.put(f"/api/transactions/{invoice['id']}", json={"customer_id": "missing"})

    assert response.status_code == 404
    assert response.json()["message"] == "Customer not found"


def test_clearing_customer_keeps_stored_name(client, make_customer, make_transaction, products):
    customer = make_customer(name="Restaurante Ayşe")
    invoice = make_transaction(
        [{"product_id": products[0]["id"], "quantity": 1}],
        customer_id=customer["id"],
        customer_name="",
    )
    assert invoice["customer_name"] == "Restaurante Ayşe"

    response = client.put(f"/api/transactions/{invoice['id']}", json={"customer_id": None})

    assert response.status_code == 200
    assert response.json()["customer_id"] is None
    assert response.json()["customer_name"] == "Restaurante Ayşe"


def test_create_invoice_accepts_camel_case_fields(client, products):
    body = {
        "transaction": {"customerName": "Cliente mostrador", "discount": ""},
        "items": [{"productId": products[0]["id"], "productName": "Café", "quantity": 1}],
    }

    response = client.post("/api/transactions", json=body)

    assert response.status_code == 201
    assert response.json()["customer_name"] == "Cliente mostrador"
    assert response.json()["discount"] == "0.00"
    assert response.json()["items"][0]["product_name"] == "Café"
