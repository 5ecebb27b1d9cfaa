"""
Pricing Routes

Sale price calculator and saved price records.

A recipe's material and packaging totals come from storage and are
already USD; anything typed into the form is in the display currency
and is tagged as Money so it is converted exactly once.
"""

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for

from constants import MAX_LENGTHS, MAX_NUMERIC_INPUT
from services.pricing import calculate_price
from utils import safe_float, safe_int, sanitize_name, sanitize_text

from .helpers import form_money, login_required, price_records_repo, recipes_repo

pricing_bp = Blueprint('pricing', __name__)


def _form_inputs(recipes):
    """
    Cost inputs for calculate_price from the submitted form.

    Returns (recipe, kwargs) where recipe may be None.
    """
    recipe = None
    recipe_id = safe_int(request.form.get('recipe_id'), default=None)
    if recipe_id is not None:
        recipe = recipes.get(recipe_id) or abort(404)

    if recipe is not None:
        actual_cost = recipes.aggregate(recipe).total_cost
        packaging_cost = form_money('packaging_cost', default=None)
        if packaging_cost is None:
            packaging_cost = recipe.total_packaging_cost
        default_units = recipe.number_of_units
    else:
        actual_cost = form_money('actual_cost')
        packaging_cost = form_money('packaging_cost')
        default_units = None

    return recipe, {
        'actual_cost': actual_cost,
        'packaging_cost': packaging_cost,
        'container_cost': form_money('container_cost'),
        'margin_percent': safe_float(request.form.get('profit_margin'), default=0.0, min_val=0, max_val=MAX_NUMERIC_INPUT),
        'number_of_units': safe_int(request.form.get('number_of_units'), default=default_units, min_val=0),
    }


@pricing_bp.route('/pricing', methods=['GET', 'POST'])
@login_required
def pricing():
    recipes = recipes_repo()
    records_repo = price_records_repo()
    breakdown = None
    recipe = None

    if request.method == 'POST':
        recipe, inputs = _form_inputs(recipes)
        breakdown = calculate_price(**inputs)

        if request.form.get('action') == 'save':
            product_name = sanitize_name(
                request.form.get('product_name'), max_length=MAX_LENGTHS['product_name'],
                default=recipe.name if recipe is not None else '',
            )
            if not product_name:
                flash('Product name is required to save a price', 'danger')
            else:
                records_repo.save_breakdown(
                    breakdown, product_name, recipe=recipe,
                    notes=sanitize_text(request.form.get('notes'), max_length=MAX_LENGTHS['notes']),
                )
                flash(f'Price for "{product_name}" saved', 'success')
                return redirect(url_for('pricing.pricing'))

    return render_template(
        'pricing.html',
        recipes=recipes.list(),
        selected_recipe=recipe,
        breakdown=breakdown,
        records=records_repo.list(),
    )


@pricing_bp.route('/pricing/<int:id>/delete', methods=['POST'])
@login_required
def price_record_delete(id):
    repo = price_records_repo()
    record = repo.get(id) or abort(404)
    repo.delete(record)
    return redirect(url_for('pricing.pricing'))
