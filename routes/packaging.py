"""
Packaging Routes

Containers, labels and other packaging items with their cost.
"""

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from constants import MAX_LENGTHS, VALID_PACKAGING_CATEGORIES
from models import PackagingItem
from utils import sanitize_name, sanitize_text

from .helpers import form_money, login_required, packaging_repo

packaging_bp = Blueprint('packaging', __name__)


def _apply_form(item):
    name = sanitize_name(request.form.get('name'), max_length=MAX_LENGTHS['packaging_name'])
    if not name:
        return 'Packaging name is required'

    category = request.form.get('category', 'container')
    if category not in VALID_PACKAGING_CATEGORIES:
        category = 'other'

    item.name = name
    item.cost = form_money('cost').canonical()
    item.category = category
    item.supplier = sanitize_name(request.form.get('supplier'), max_length=MAX_LENGTHS['supplier'])
    item.description = sanitize_text(request.form.get('description'), max_length=MAX_LENGTHS['notes'])
    return None


@packaging_bp.route('/packaging')
@login_required
def packaging_list():
    return render_template(
        'packaging.html',
        items=packaging_repo().list(),
        categories=sorted(VALID_PACKAGING_CATEGORIES),
    )


@packaging_bp.route('/packaging/add', methods=['POST'])
@login_required
def packaging_add():
    item = PackagingItem()
    error = _apply_form(item)
    if error:
        flash(error, 'danger')
        return redirect(url_for('packaging.packaging_list'))
    packaging_repo().save(item)
    flash(f'Packaging "{item.name}" added!', 'success')
    return redirect(url_for('packaging.packaging_list'))


@packaging_bp.route('/packaging/<int:id>/edit', methods=['POST'])
@login_required
def packaging_edit(id):
    repo = packaging_repo()
    item = repo.get(id) or abort(404)
    error = _apply_form(item)
    if error:
        flash(error, 'danger')
    else:
        repo.save(item)
        flash(f'Packaging "{item.name}" updated!', 'success')
    return redirect(url_for('packaging.packaging_list'))


@packaging_bp.route('/packaging/<int:id>/delete', methods=['POST'])
@login_required
def packaging_delete(id):
    repo = packaging_repo()
    item = repo.get(id) or abort(404)
    repo.delete(item)
    return redirect(url_for('packaging.packaging_list'))
