"""
Raw Material Routes

Purchased materials. Costs are typed in the display currency and stored
in USD; cost per gram is recomputed on every save.
"""

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from constants import MAX_LENGTHS, MAX_NUMERIC_INPUT, WEIGHT_UNITS
from models import RawMaterial
from services.export import MATERIAL_EXPORT_COLUMNS, prepare_material_rows, rows_to_csv
from services.units import normalize_unit
from utils import parse_date, safe_float, sanitize_name, sanitize_text

from .helpers import csv_response, form_money, login_required, materials_repo

materials_bp = Blueprint('materials', __name__)


def _apply_form(material):
    """
    Copy submitted fields onto a material.

    Returns an error message, or None if the form is valid.
    """
    name = sanitize_name(request.form.get('name'), max_length=MAX_LENGTHS['material_name'])
    if not name:
        return 'Material name is required'

    quantity = safe_float(request.form.get('total_quantity'), default=0.0, max_val=MAX_NUMERIC_INPUT)
    if quantity <= 0:
        return 'Purchased quantity must be greater than zero'

    unit = normalize_unit(request.form.get('unit', 'g'))
    if unit not in WEIGHT_UNITS:
        return f'Unit must be one of {", ".join(WEIGHT_UNITS)}'

    material.name = name
    material.total_cost = form_money('total_cost').canonical()
    material.total_quantity = quantity
    material.unit = unit
    material.supplier_name = sanitize_name(request.form.get('supplier_name'), max_length=MAX_LENGTHS['supplier'])
    material.supplier_contact = sanitize_name(request.form.get('supplier_contact'), max_length=MAX_LENGTHS['supplier'])
    material.last_purchase_date = parse_date(request.form.get('last_purchase_date'))
    material.purchase_notes = sanitize_text(request.form.get('purchase_notes'), max_length=MAX_LENGTHS['notes'])
    material.usage_notes = sanitize_text(request.form.get('usage_notes'), max_length=MAX_LENGTHS['notes'])
    material.typical_monthly_usage = safe_float(
        request.form.get('typical_monthly_usage'), default=None, min_val=0, max_val=MAX_NUMERIC_INPUT
    )
    return None


@materials_bp.route('/materials')
@login_required
def materials_list():
    search = request.args.get('q', '').strip().lower()
    materials = materials_repo().list()
    if search:
        materials = [m for m in materials if search in m.name.lower()]
    return render_template('materials.html', materials=materials, search=search)


@materials_bp.route('/material/add', methods=['POST'])
@login_required
def material_add():
    material = RawMaterial()
    error = _apply_form(material)
    if error:
        flash(error, 'danger')
        return redirect(url_for('materials.materials_list'))

    materials_repo().save(material)
    flash(f'Material "{material.name}" added!', 'success')
    return redirect(url_for('materials.materials_list'))


@materials_bp.route('/material/<int:id>/edit', methods=['GET', 'POST'])
@login_required
def material_edit(id):
    repo = materials_repo()
    material = repo.get(id) or abort(404)

    if request.method == 'POST':
        error = _apply_form(material)
        if error:
            flash(error, 'danger')
            return render_template('material_form.html', material=material), 400
        repo.save(material)
        flash(f'Material "{material.name}" updated!', 'success')
        return redirect(url_for('materials.materials_list'))

    return render_template('material_form.html', material=material)


@materials_bp.route('/material/<int:id>/delete', methods=['POST'])
@login_required
def material_delete(id):
    repo = materials_repo()
    material = repo.get(id) or abort(404)
    name = material.name
    repo.delete(material)
    flash(f'Material "{name}" deleted!', 'success')
    return redirect(url_for('materials.materials_list'))


@materials_bp.route('/materials/export.csv')
@login_required
def materials_export():
    rows = prepare_material_rows(materials_repo().list())
    return csv_response(rows_to_csv(rows, MATERIAL_EXPORT_COLUMNS), 'raw_materials.csv')
