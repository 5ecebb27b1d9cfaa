"""
Inventory Routes

Stock on hand with a minimum level per item. Volume and count units are
stored as entered.
"""

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from constants import INVENTORY_UNITS, MAX_LENGTHS, MAX_NUMERIC_INPUT
from models import InventoryItem
from services.export import INVENTORY_EXPORT_COLUMNS, prepare_inventory_rows, rows_to_csv
from services.units import normalize_unit
from utils import safe_float, sanitize_name, sanitize_text

from .helpers import csv_response, inventory_repo, login_required

inventory_bp = Blueprint('inventory', __name__)


def _form_amount(field, default=0.0):
    return safe_float(request.form.get(field), default=default, min_val=0, max_val=MAX_NUMERIC_INPUT)


@inventory_bp.route('/inventory')
@login_required
def inventory_list():
    search = request.args.get('q', '').strip().lower()
    items = inventory_repo().list()
    if search:
        items = [i for i in items if search in i.name.lower()]
    return render_template('inventory.html', items=items, search=search)


@inventory_bp.route('/inventory/add', methods=['POST'])
@login_required
def inventory_add():
    name = sanitize_name(request.form.get('name'), max_length=MAX_LENGTHS['material_name'])
    unit = normalize_unit(request.form.get('unit', 'g'))
    if not name:
        flash('Item name is required', 'danger')
        return redirect(url_for('inventory.inventory_list'))
    if unit not in INVENTORY_UNITS:
        flash(f'Unit must be one of {", ".join(INVENTORY_UNITS)}', 'danger')
        return redirect(url_for('inventory.inventory_list'))

    item = InventoryItem(
        name=name,
        quantity=_form_amount('quantity'),
        unit=unit,
        minimum_level=_form_amount('minimum_level'),
        notes=sanitize_text(request.form.get('notes'), max_length=MAX_LENGTHS['notes']),
    )
    inventory_repo().save(item)
    flash(f'"{item.name}" added to inventory', 'success')
    return redirect(url_for('inventory.inventory_list'))


@inventory_bp.route('/inventory/<int:id>/update', methods=['POST'])
@login_required
def inventory_update(id):
    repo = inventory_repo()
    item = repo.get(id) or abort(404)
    item.quantity = _form_amount('quantity', default=item.quantity)
    item.minimum_level = _form_amount('minimum_level', default=item.minimum_level)
    repo.save(item)
    return redirect(url_for('inventory.inventory_list'))


@inventory_bp.route('/inventory/<int:id>/delete', methods=['POST'])
@login_required
def inventory_delete(id):
    repo = inventory_repo()
    item = repo.get(id) or abort(404)
    repo.delete(item)
    return redirect(url_for('inventory.inventory_list'))


@inventory_bp.route('/inventory/export.csv')
@login_required
def inventory_export():
    rows = prepare_inventory_rows(inventory_repo().list())
    return csv_response(rows_to_csv(rows, INVENTORY_EXPORT_COLUMNS), 'inventory.csv')
