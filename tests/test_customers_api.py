from datetime import timedelta

from app.shared.database.models import Customer


def test_create_customer_with_blank_optional_fields(client):
    response = client.post("/api/customers", json={
        "name": "Restaurante Ayşe", "email": "", "phone": "", "address": ""
    })

    assert response.status_code == 201
    customer = response.json()
    assert customer["name"] == "Restaurante Ayşe"
    assert customer["email"] is None
    assert customer["phone"] is None
    assert customer["is_active"] is True


def test_create_customer_requires_name(client):
    response = client.post("/api/customers", json={"name": ""})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid customer data"


def test_list_and_search_customers(client, make_customer, shift_created_at):
    first = make_customer(name="Ahmet Yılmaz")
    make_customer(name="Laura Gómez")
    shift_created_at(Customer, first["id"], timedelta(days=-3))

    names = [c["name"] for c in client.get("/api/customers").json()]
    assert names == ["Laura Gómez", "Ahmet Yılmaz"]

    found = client.get("/api/customers", params={"search": "gómez"}).json()
    assert [c["name"] for c in found] == ["Laura Gómez"]


def test_get_customer(client, make_customer):
    customer = make_customer(phone="+90 212 555 0199")

    response = client.get(f"/api/customers/{customer['id']}")
    assert response.status_code == 200
    assert response.json()["phone"] == "+90 212 555 0199"

    missing = client.get("/api/customers/missing")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Customer not found"


def test_update_customer(client, make_customer):
    customer = make_customer(name="Cliente", email="old@example.com")

    response = client.put(f"/api/customers/{customer['id']}", json={"email": "new@example.com"})

    assert response.status_code == 200
    assert response.json()["email"] == "new@example.com"
    assert response.json()["name"] == "Cliente"
    assert client.put("/api/customers/missing", json={"name": "X"}).status_code == 404


def test_delete_customer(client, make_customer):
    customer = make_customer()
    assert client.delete(f"/api/customers/{customer['id']}").status_code == 204
    assert client.get(f"/api/customers/{customer['id']}").status_code == 404


def test_delete_customer_with_invoices_is_a_conflict(client, make_customer, make_product, make_transaction):
    customer = make_customer()
    product = make_product()
    make_transaction([{"product_id": product["id"], "quantity": 1}], customer_id=customer["id"])

    response = client.delete(f"/api/customers/{customer['id']}")
    assert response.status_code == 409
    assert response.json()["message"] == "Customer is still referenced by transactions"
