def test_health_check(client):
    response = client.get('/health')
    assert response.status_code == 200
    json_data = response.get_json()
    assert json_data.get('status') == 'ok'


def test_api_routes_are_versioned(app):
    rules = {str(r.rule) for r in app.url_map.iter_rules()}
    assert "/api/v1/vendor/cart/checkout" in rules
    assert "/api/v1/suppliers" in rules
    assert "/api/v1/supplier/products" in rules
