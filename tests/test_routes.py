import pytest

from models import db, InventoryItem, PriceRecord, RawMaterial, Recipe


def add_material(client, name='Shea Butter', total_cost='15.99', total_quantity='500', unit='g'):
    return client.post('/material/add', data={
        'name': name, 'total_cost': total_cost,
        'total_quantity': total_quantity, 'unit': unit,
    })


def make_balm(app, client):
    """Create a 100 g single-ingredient recipe through the web layer."""
    add_material(client)
    client.post('/recipe/add', data={'name': 'Lip Balm', 'category': 'Lip Care'})
    with app.app_context():
        material_id = RawMaterial.query.one().id
        recipe_id = Recipe.query.one().id
    client.post(f'/recipe/{recipe_id}/ingredient/add', data={
        'material_id': material_id, 'amount': '100', 'unit': 'g',
    })
    return recipe_id


def test_pages_require_sign_in(client):
    response = client.get('/materials')
    assert response.status_code == 302
    assert '/login' in response.headers['Location']


def test_login_page(client):
    assert client.get('/login').status_code == 200


def test_login_rejects_bad_email(client):
    assert client.post('/login', data={'email': 'not-an-email'}).status_code == 400


def test_login_creates_user_and_redirects(client):
    response = client.post('/login?next=/recipes', data={'email': 'new@example.com'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith('/recipes')
    assert client.get('/recipes').status_code == 200


def test_add_material(app, auth_client):
    response = add_material(auth_client)
    assert response.status_code == 302
    with app.app_context():
        material = RawMaterial.query.one()
        assert material.cost_per_gram == pytest.approx(0.03198)
    assert b'Shea Butter' in auth_client.get('/materials').data


def test_material_cost_entered_in_display_currency(app, auth_client):
    auth_client.post('/currency', data={'currency': 'EUR'})
    add_material(auth_client, total_cost='9.2', total_quantity='1', unit='kg')
    with app.app_context():
        assert RawMaterial.query.one().total_cost == pytest.approx(10)


def test_material_rejects_volume_units(app, auth_client):
    add_material(auth_client, unit='ml')
    with app.app_context():
        assert RawMaterial.query.count() == 0


def test_recipe_view_shows_live_cost(app, auth_client):
    recipe_id = make_balm(app, auth_client)
    page = auth_client.get(f'/recipe/{recipe_id}')
    assert page.status_code == 200
    assert b'$3.198' in page.data


def test_scale_preview_and_save(app, auth_client):
    recipe_id = make_balm(app, auth_client)

    preview = auth_client.post(f'/recipe/{recipe_id}/scale', data={
        'target_weight': '250', 'action': 'preview',
    })
    assert preview.status_code == 200
    assert b'2.5:1 (Scaled Up)' in preview.data
    assert b'$7.995' in preview.data
    with app.app_context():
        assert db.session.get(Recipe, recipe_id).ingredients[0].amount == 100

    saved = auth_client.post(f'/recipe/{recipe_id}/scale', data={
        'target_weight': '250', 'action': 'save',
    })
    assert saved.status_code == 302
    with app.app_context():
        recipe = db.session.get(Recipe, recipe_id)
        assert recipe.ingredients[0].amount == pytest.approx(250)
        assert recipe.total_cost == pytest.approx(7.995)


def test_scale_rejects_non_positive_target(app, auth_client):
    recipe_id = make_balm(app, auth_client)
    response = auth_client.post(f'/recipe/{recipe_id}/scale', data={'target_weight': '0'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith(f'/recipe/{recipe_id}/scale')


def test_label_and_export(app, auth_client):
    recipe_id = make_balm(app, auth_client)

    label = auth_client.get(f'/recipe/{recipe_id}/label?brand_name=Hive')
    assert label.status_code == 200
    assert b'Shea Butter' in label.data
    assert b'Hive' in label.data

    export = auth_client.get(f'/recipe/{recipe_id}/export.csv')
    assert export.status_code == 200
    assert export.mimetype == 'text/csv'
    assert 'attachment' in export.headers['Content-Disposition']
    lines = export.get_data(as_text=True).splitlines()
    assert lines[0].startswith('Ingredient Name,Used Amount')
    assert lines[1].startswith('Shea Butter,100.00 g')


def test_pricing_calculator(auth_client):
    response = auth_client.post('/pricing', data={
        'actual_cost': '10', 'packaging_cost': '1', 'container_cost': '0.5',
        'profit_margin': '20',
    })
    assert response.status_code == 200
    assert b'$13.80' in response.data


def test_pricing_save_for_recipe(app, auth_client):
    recipe_id = make_balm(app, auth_client)
    response = auth_client.post('/pricing', data={
        'recipe_id': recipe_id, 'container_cost': '0', 'profit_margin': '0',
        'action': 'save',
    })
    assert response.status_code == 302
    with app.app_context():
        record = PriceRecord.query.one()
        assert record.product_name == 'Lip Balm'
        assert record.actual_cost == pytest.approx(3.198)
        assert record.final_price == pytest.approx(3.198)


def test_other_users_recipe_is_not_found(app, client):
    client.post('/login', data={'email': 'first@example.com'})
    recipe_id = make_balm(app, client)
    client.post('/logout')
    client.post('/login', data={'email': 'second@example.com'})
    assert client.get(f'/recipe/{recipe_id}').status_code == 404
    assert client.post(f'/recipe/{recipe_id}/delete').status_code == 404


def test_listings_follow_material_price_changes(app, auth_client):
    make_balm(app, auth_client)
    with app.app_context():
        material_id = RawMaterial.query.one().id

    auth_client.post(f'/material/{material_id}/edit', data={
        'name': 'Shea Butter', 'total_cost': '31.98', 'total_quantity': '500', 'unit': 'g',
    })

    for path in ('/recipes', '/'):
        page = auth_client.get(path).data
        assert b'$6.396' in page, path
        assert b'$3.198' not in page, path


def test_inventory_stock_status(app, auth_client):
    auth_client.post('/inventory/add', data={
        'name': 'Rose Water', 'quantity': '200', 'unit': 'ml', 'minimum_level': '250',
    })
    assert b'Out of Stock' in auth_client.get('/inventory').data

    with app.app_context():
        item_id = InventoryItem.query.one().id
    auth_client.post(f'/inventory/{item_id}/update', data={'quantity': '1000'})

    page = auth_client.get('/inventory').data
    assert b'In Stock' in page
    assert b'Out of Stock' not in page
    with app.app_context():
        item = InventoryItem.query.one()
        assert item.quantity == 1000
        assert item.minimum_level == 250


def test_inventory_and_material_exports(auth_client):
    add_material(auth_client)
    auth_client.post('/inventory/add', data={
        'name': 'Jar 50ml', 'quantity': '3', 'unit': 'pcs', 'minimum_level': '10',
    })

    materials = auth_client.get('/materials/export.csv')
    assert materials.mimetype == 'text/csv'
    lines = materials.get_data(as_text=True).splitlines()
    assert lines[0] == 'Material Name,Total Cost,Total Quantity,Unit,Cost per Gram,Supplier,Last Purchase Date'
    assert lines[1].startswith('Shea Butter,15.99,500.0,g,0.03198')

    inventory = auth_client.get('/inventory/export.csv')
    assert 'attachment' in inventory.headers['Content-Disposition']
    lines = inventory.get_data(as_text=True).splitlines()
    assert lines[0] == 'Material Name,Quantity,Unit,Minimum Level,Status,Notes'
    assert lines[1] == 'Jar 50ml,3.0,pcs,10.0,Out of Stock,'
