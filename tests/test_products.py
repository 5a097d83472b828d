from app.extensions import db
from app.models import Product
from app.schemas import PRODUCT_CATEGORIES
from tests.helpers import image_file

PRODUCT = {
    'name': 'Pro Jersey 2025',
    'description': 'Official match jersey',
    'price': 59.99,
    'image': 'https://cdn.example.com/jersey.png',
    'category': 'apparel',
}


def _product_count(app):
    with app.app_context():
        return db.session.query(Product).count()


def _public_ids(client):
    return [p['id'] for p in client.get('/api/products').get_json()]


def _admin_ids(client):
    return [p['id'] for p in client.get('/api/admin/products').get_json()]


def test_in_stock_defaults_true_and_is_public(client, admin_client):
    r = admin_client.post('/api/admin/products', json=PRODUCT)
    assert r.status_code == 201
    product = r.get_json()
    assert product['inStock'] is True
    assert product['price'] == 59.99
    assert product['id'] in _public_ids(client)


def test_out_of_stock_hidden_from_public(client, admin_client):
    r = admin_client.post('/api/admin/products', json=dict(PRODUCT, inStock=False))
    product = r.get_json()
    assert product['inStock'] is False
    assert product['id'] not in _public_ids(client)
    assert product['id'] in _admin_ids(admin_client)


def test_form_in_stock_false(client, admin_client):
    data = dict(PRODUCT, price='25', inStock='false')
    r = admin_client.post('/api/admin/products', data=data, content_type='multipart/form-data')
    assert r.status_code == 201
    product = r.get_json()
    assert product['inStock'] is False
    assert product['price'] == 25.0
    assert _public_ids(client) == []


def test_form_blank_in_stock_defaults_true(admin_client):
    data = dict(PRODUCT, price='25', inStock='')
    r = admin_client.post('/api/admin/products', data=data, content_type='multipart/form-data')
    assert r.status_code == 201
    assert r.get_json()['inStock'] is True


def test_category_must_be_known(app, admin_client):
    r = admin_client.post('/api/admin/products', json=dict(PRODUCT, category='weapons'))
    assert r.status_code == 400
    assert 'category' in r.get_json()['error']
    assert _product_count(app) == 0

    for category in PRODUCT_CATEGORIES:
        r = admin_client.post('/api/admin/products', json=dict(PRODUCT, category=category))
        assert r.status_code == 201


def test_image_required(app, admin_client):
    body = {k: v for k, v in PRODUCT.items() if k != 'image'}
    r = admin_client.post('/api/admin/products', json=body)
    assert r.status_code == 400
    assert r.get_json() == {'error': 'Image is required'}
    assert _product_count(app) == 0


def test_uploaded_image(admin_client):
    data = {k: v for k, v in PRODUCT.items() if k != 'image'}
    data['image'] = image_file('hoodie.jpeg', 'image/jpeg')
    r = admin_client.post('/api/admin/products', data=data, content_type='multipart/form-data')
    assert r.status_code == 201
    assert r.get_json()['image'].endswith('.jpeg')


def test_negative_price_rejected(admin_client):
    r = admin_client.post('/api/admin/products', json=dict(PRODUCT, price=-1))
    assert r.status_code == 400


def test_update(client, admin_client):
    product = admin_client.post('/api/admin/products', json=PRODUCT).get_json()
    r = admin_client.put(f"/api/admin/products/{product['id']}", json={'price': 49.5, 'inStock': False})
    assert r.status_code == 200
    updated = r.get_json()
    assert updated['price'] == 49.5
    assert updated['inStock'] is False
    assert updated['name'] == PRODUCT['name']
    assert _public_ids(client) == []

    r = admin_client.put(f"/api/admin/products/{product['id']}", json={'category': 'nope'})
    assert r.status_code == 400


def test_get_and_delete(app, admin_client):
    product = admin_client.post('/api/admin/products', json=PRODUCT).get_json()
    r = admin_client.get(f"/api/admin/products/{product['id']}")
    assert r.status_code == 200

    r = admin_client.delete(f"/api/admin/products/{product['id']}")
    assert r.status_code == 200
    assert _product_count(app) == 0

    r = admin_client.get(f"/api/admin/products/{product['id']}")
    assert r.status_code == 404


def test_delete_missing_leaves_store_unchanged(app, admin_client):
    admin_client.post('/api/admin/products', json=PRODUCT)
    r = admin_client.delete('/api/admin/products/31337')
    assert r.status_code == 404
    assert _product_count(app) == 1
