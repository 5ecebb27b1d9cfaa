"""
Export Service

Flat rows for CSV downloads: a recipe's cost breakdown, the raw
material list and the inventory. Money columns are in USD.
"""

import csv
import io

from .aggregation import aggregate_recipe
from .units import format_weight

EXPORT_COLUMNS = [
    'Ingredient Name',
    'Used Amount',
    'Converted to Grams',
    'Cost per Gram',
    'Total Cost',
    'Recipe Total Cost',
    'Cost per Unit',
]

MATERIAL_EXPORT_COLUMNS = [
    'Material Name',
    'Total Cost',
    'Total Quantity',
    'Unit',
    'Cost per Gram',
    'Supplier',
    'Last Purchase Date',
]

INVENTORY_EXPORT_COLUMNS = [
    'Material Name',
    'Quantity',
    'Unit',
    'Minimum Level',
    'Status',
    'Notes',
]


def prepare_export_rows(recipe, materials):
    """One row per ingredient line, costs from a live aggregation (USD)."""
    aggregated = aggregate_recipe(recipe, materials)
    rows = []
    for line in aggregated.lines:
        grams = line.amount_in_grams
        rows.append({
            'Ingredient Name': line.material_name,
            'Used Amount': format_weight(line.amount, line.unit),
            'Converted to Grams': round(grams, 4),
            'Cost per Gram': round(line.cost / grams, 6) if grams else 0.0,
            'Total Cost': round(line.cost, 4),
            'Recipe Total Cost': round(aggregated.total_cost, 4),
            'Cost per Unit': (
                round(aggregated.cost_per_unit, 4)
                if aggregated.cost_per_unit is not None else ''
            ),
        })
    return rows


def prepare_material_rows(materials):
    return [
        {
            'Material Name': m.name,
            'Total Cost': round(m.total_cost or 0.0, 4),
            'Total Quantity': m.total_quantity,
            'Unit': m.unit,
            'Cost per Gram': round(m.cost_per_gram or 0.0, 6),
            'Supplier': m.supplier_name or '',
            'Last Purchase Date': m.last_purchase_date.isoformat() if m.last_purchase_date else '',
        }
        for m in materials
    ]


def prepare_inventory_rows(items):
    """Inventory rows; an item at or below its minimum level is Out of Stock."""
    return [
        {
            'Material Name': item.name,
            'Quantity': item.quantity,
            'Unit': item.unit,
            'Minimum Level': item.minimum_level or 0.0,
            'Status': item.stock_status,
            'Notes': item.notes or '',
        }
        for item in items
    ]


def rows_to_csv(rows, columns=EXPORT_COLUMNS):
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()
