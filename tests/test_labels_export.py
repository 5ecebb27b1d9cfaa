import csv
import io
from datetime import date

import pytest

from models import InventoryItem, RawMaterial
from services.export import (
    EXPORT_COLUMNS, INVENTORY_EXPORT_COLUMNS, MATERIAL_EXPORT_COLUMNS,
    prepare_export_rows, prepare_inventory_rows, prepare_material_rows, rows_to_csv,
)
from services.labels import build_label

from conftest import material, recipe


@pytest.fixture
def materials():
    return {
        1: material(1, 'Butyrospermum Parkii Butter', 15.99, 500),
        2: material(2, 'Simmondsia Chinensis Oil', 22.00, 1, 'kg'),
        3: material(3, 'Tocopherol', 8.00, 100),
    }


@pytest.fixture
def balm():
    return recipe((2, 30, 'g'), (1, 69, 'g'), (3, 1, 'g'), name='Lip Balm')


def test_label_lists_ingredients_by_share(balm, materials):
    label = build_label(balm, materials)
    assert [i.name for i in label.ingredients] == [
        'Butyrospermum Parkii Butter', 'Simmondsia Chinensis Oil', 'Tocopherol',
    ]
    assert [i.percentage for i in label.ingredients] == [69.0, 30.0, 1.0]
    assert label.ingredient_statement == (
        'Butyrospermum Parkii Butter, Simmondsia Chinensis Oil, Tocopherol'
    )


def test_label_defaults(balm, materials):
    label = build_label(balm, materials)
    assert label.product_name == 'Lip Balm'
    assert label.net_weight == 100


def test_label_overrides(balm, materials):
    label = build_label(balm, materials, product_name='Honey Balm', brand_name='Hive',
                        net_weight=15, batch_number='B-001')
    assert label.product_name == 'Honey Balm'
    assert label.brand_name == 'Hive'
    assert label.net_weight == 15
    assert label.batch_number == 'B-001'


def test_export_rows(balm, materials):
    rows = prepare_export_rows(balm, materials)
    assert len(rows) == 3
    first = rows[0]
    assert set(first) == set(EXPORT_COLUMNS)
    assert first['Ingredient Name'] == 'Simmondsia Chinensis Oil'
    assert first['Used Amount'] == '30.00 g'
    assert first['Converted to Grams'] == 30
    assert first['Cost per Gram'] == pytest.approx(0.022)
    assert first['Total Cost'] == pytest.approx(0.66)
    assert first['Cost per Unit'] == ''
    total = round(0.66 + 69 * 0.03198 + 0.08, 4)
    assert all(row['Recipe Total Cost'] == pytest.approx(total) for row in rows)


def test_export_cost_per_unit(materials):
    rows = prepare_export_rows(recipe((3, 100, 'g'), number_of_units=4), materials)
    assert rows[0]['Cost per Unit'] == pytest.approx(2.0)


def test_csv_has_header_and_rows(balm, materials):
    body = rows_to_csv(prepare_export_rows(balm, materials))
    parsed = list(csv.DictReader(io.StringIO(body)))
    assert list(parsed[0]) == EXPORT_COLUMNS
    assert [row['Ingredient Name'] for row in parsed] == [
        'Simmondsia Chinensis Oil', 'Butyrospermum Parkii Butter', 'Tocopherol',
    ]


def test_inventory_rows_mark_low_stock():
    items = [
        InventoryItem(name='Rose Water', quantity=500, unit='ml', minimum_level=100, notes='fridge'),
        InventoryItem(name='Jars', quantity=10, unit='pcs', minimum_level=10),
        InventoryItem(name='Mica', quantity=0, unit='g'),
    ]
    rows = prepare_inventory_rows(items)
    assert [row['Status'] for row in rows] == ['In Stock', 'Out of Stock', 'Out of Stock']
    assert rows[0]['Notes'] == 'fridge'
    assert rows[2]['Minimum Level'] == 0.0
    assert rows_to_csv(rows, INVENTORY_EXPORT_COLUMNS).splitlines()[0] == ','.join(INVENTORY_EXPORT_COLUMNS)


def test_material_rows():
    shea = RawMaterial(name='Shea Butter', total_cost=15.99, total_quantity=500, unit='g',
                       cost_per_gram=0.03198, supplier_name='Acme Oils',
                       last_purchase_date=date(2024, 3, 1))
    row = prepare_material_rows([shea])[0]
    assert set(row) == set(MATERIAL_EXPORT_COLUMNS)
    assert row['Supplier'] == 'Acme Oils'
    assert row['Last Purchase Date'] == '2024-03-01'
    assert row['Cost per Gram'] == pytest.approx(0.03198)
