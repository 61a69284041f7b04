from app.version import API_PREFIX


def test_catalog_requires_login(client):
    assert client.get(f"{API_PREFIX}/suppliers").status_code == 401


def test_list_suppliers_featured_first(client, vendor, market):
    _, headers = vendor
    r = client.get(f"{API_PREFIX}/suppliers", headers=headers)
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["count"] == 2
    assert [s["business_name"] for s in data["suppliers"]] == ["Fresh Farms", "Spice Route"]


def test_supplier_filters(client, vendor, market):
    _, headers = vendor
    r = client.get(f"{API_PREFIX}/suppliers?category=SPICES", headers=headers)
    assert [s["business_name"] for s in r.get_json()["data"]["suppliers"]] == ["Spice Route"]

    r = client.get(f"{API_PREFIX}/suppliers?location=mumbai&q=farm", headers=headers)
    assert [s["business_name"] for s in r.get_json()["data"]["suppliers"]] == ["Fresh Farms"]

    r = client.get(f"{API_PREFIX}/suppliers?location=mumbai&category=spices", headers=headers)
    assert r.get_json()["data"] == {"suppliers": [], "count": 0}


def test_supplier_detail_and_products(client, vendor, market):
    _, headers = vendor
    spice_id = market["spice"].id
    r = client.get(f"{API_PREFIX}/suppliers/{spice_id}", headers=headers)
    assert r.get_json()["data"]["business_name"] == "Spice Route"

    r = client.get(f"{API_PREFIX}/suppliers/{spice_id}/products", headers=headers)
    data = r.get_json()["data"]
    assert data["supplier"]["id"] == spice_id
    # inactive basmati is hidden
    assert [p["name"] for p in data["products"]] == ["Red Chilli"]

    fresh_id = market["fresh"].id
    r = client.get(f"{API_PREFIX}/suppliers/{fresh_id}/products?q=tom", headers=headers)
    assert [p["name"] for p in r.get_json()["data"]["products"]] == ["Tomato"]

    assert client.get(f"{API_PREFIX}/suppliers/9999", headers=headers).status_code == 404
    assert client.get(f"{API_PREFIX}/suppliers/9999/products", headers=headers).status_code == 404


def test_product_detail(client, supplier_user, market):
    _, headers = supplier_user
    chilli = market["products"]["chilli"]
    r = client.get(f"{API_PREFIX}/products/{chilli.id}", headers=headers)
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["supplier"]["business_name"] == "Spice Route"

    basmati = market["products"]["basmati"]
    assert client.get(f"{API_PREFIX}/products/{basmati.id}", headers=headers).status_code == 404
