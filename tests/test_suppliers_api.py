def test_create_and_get_supplier(client):
    response = client.post("/api/suppliers", json={
        "name": "Lácteos del Valle",
        "contact_person": "Mehmet Kaya",
        "tax_number": "1234567890",
        "payment_terms": "Contado",
        "email": "",
    })

    assert response.status_code == 201
    supplier = response.json()
    assert supplier["contact_person"] == "Mehmet Kaya"
    assert supplier["email"] is None

    fetched = client.get(f"/api/suppliers/{supplier['id']}").json()
    assert fetched["tax_number"] == "1234567890"


def test_supplier_not_found(client):
    response = client.get("/api/suppliers/missing")
    assert response.status_code == 404
    assert response.json()["message"] == "Supplier not found"


def test_create_supplier_requires_name(client):
    response = client.post("/api/suppliers", json={"contact_person": "Nadie"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid supplier data"


def test_search_suppliers_by_name(client, make_supplier):
    make_supplier(name="Distribuidora Norte")
    make_supplier(name="Lácteos del Valle")

    found = client.get("/api/suppliers", params={"search": "norte"}).json()
    assert [s["name"] for s in found] == ["Distribuidora Norte"]
    assert len(client.get("/api/suppliers").json()) == 2


def test_supplier_products_lists_only_active_products(client, make_supplier, make_product):
    supplier = make_supplier()
    other = make_supplier(name="Otro")
    make_product(name="Activo", supplier_id=supplier["id"])
    make_product(name="Inactivo", supplier_id=supplier["id"], is_active=False)
    make_product(name="De otro proveedor", supplier_id=other["id"])

    response = client.get(f"/api/suppliers/{supplier['id']}/products")

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Activo"]


def test_update_supplier(client, make_supplier):
    supplier = make_supplier(payment_terms="30 días")

    response = client.put(f"/api/suppliers/{supplier['id']}", json={"payment_terms": "60 días"})
    assert response.status_code == 200
    assert response.json()["payment_terms"] == "60 días"
    assert response.json()["name"] == supplier["name"]

    assert client.put(f"/api/suppliers/{supplier['id']}", json={"name": ""}).status_code == 400


def test_delete_supplier(client, make_supplier):
    supplier = make_supplier()
    assert client.delete(f"/api/suppliers/{supplier['id']}").status_code == 204
    assert client.get(f"/api/suppliers/{supplier['id']}").status_code == 404


def test_delete_supplier_with_products_is_a_conflict(client, make_supplier, make_product):
    supplier = make_supplier()
    make_product(supplier_id=supplier["id"])

    response = client.delete(f"/api/suppliers/{supplier['id']}")
    assert response.status_code == 409
    assert client.get(f"/api/suppliers/{supplier['id']}").status_code == 200
