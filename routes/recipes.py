"""
Recipe Routes

Recipe CRUD, ingredient lines, scaling, labels, CSV export and versions.
Every page that shows money re-aggregates against the live materials.
"""

import logging

from flask import (
    Blueprint, abort, flash, redirect, render_template, request, url_for
)

from constants import MAX_LENGTHS, MAX_NUMERIC_INPUT, VALID_RECIPE_CATEGORIES, WEIGHT_UNITS
from services.export import prepare_export_rows, rows_to_csv
from services.labels import build_label
from services.scaling import (
    ScalingError, format_scaling_factor, scale_recipe, scaling_basis, scaling_options
)
from services.units import normalize_unit
from utils import optional_positive, safe_float, safe_int, sanitize_name, sanitize_text

from .helpers import csv_response, login_required, materials_repo, packaging_repo, recipes_repo

logger = logging.getLogger(__name__)

recipes_bp = Blueprint('recipes', __name__)

# Clamp for a single ingredient amount
MAX_INGREDIENT_AMOUNT = 1_000_000


def _recipe_fields():
    """Recipe fields from the submitted form, or (None, error)."""
    name = sanitize_name(request.form.get('name'), max_length=MAX_LENGTHS['recipe_name'])
    if not name:
        return None, 'Recipe name is required'

    category = request.form.get('category', 'Other')
    if category not in VALID_RECIPE_CATEGORIES:
        category = 'Other'

    units = safe_int(request.form.get('number_of_units'), default=None, min_val=0, max_val=MAX_NUMERIC_INPUT)
    return {
        'name': name,
        'category': category,
        'description': sanitize_text(request.form.get('description'), max_length=MAX_LENGTHS['notes']),
        'instructions': sanitize_text(request.form.get('instructions'), max_length=MAX_LENGTHS['instructions']),
        'batch_size': optional_positive(request.form.get('batch_size'), max_val=MAX_NUMERIC_INPUT),
        'number_of_units': units or None,
    }, None


def _line_amount_and_unit(default_unit='g'):
    amount = safe_float(request.form.get('amount'), default=0.0, max_val=MAX_INGREDIENT_AMOUNT)
    unit = normalize_unit(request.form.get('unit', default_unit))
    if amount <= 0:
        return None, None, 'Ingredient amount must be greater than zero'
    if unit not in WEIGHT_UNITS:
        return None, None, f'Unit must be one of {", ".join(WEIGHT_UNITS)}'
    return amount, unit, None


def _get_recipe(repo, id):
    return repo.get(id) or abort(404)


@recipes_bp.route('/recipes')
@login_required
def recipes_list():
    category = request.args.get('category', 'all')
    repo = recipes_repo()
    recipes = repo.list()
    categories = sorted({r.category for r in recipes if r.category})
    if category != 'all':
        recipes = [r for r in recipes if r.category == category]
    return render_template('recipes.html', summaries=repo.aggregate_many(recipes), categories=categories,
                           selected_category=category)


@recipes_bp.route('/recipe/<int:id>')
@login_required
def recipe_view(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    aggregated = repo.aggregate(recipe)
    return render_template('recipe_view.html', recipe=recipe, aggregated=aggregated)


@recipes_bp.route('/recipe/add', methods=['GET', 'POST'])
@login_required
def recipe_add():
    if request.method == 'POST':
        fields, error = _recipe_fields()
        if error:
            flash(error, 'danger')
            return render_template('recipe_form.html', recipe=None,
                                   categories=sorted(VALID_RECIPE_CATEGORIES)), 400

        recipe = recipes_repo().create(**fields)
        flash(f'Recipe "{recipe.name}" created!', 'success')
        return redirect(url_for('recipes.recipe_edit', id=recipe.id))

    return render_template('recipe_form.html', recipe=None, categories=sorted(VALID_RECIPE_CATEGORIES))


@recipes_bp.route('/recipe/<int:id>/edit', methods=['GET', 'POST'])
@login_required
def recipe_edit(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)

    if request.method == 'POST':
        fields, error = _recipe_fields()
        if error:
            flash(error, 'danger')
            return redirect(url_for('recipes.recipe_edit', id=id))

        repo.update(recipe, **fields)
        packaging_ids = [safe_int(v, default=None) for v in request.form.getlist('packaging_ids')]
        repo.set_packaging(recipe, [pid for pid in packaging_ids if pid is not None])
        flash(f'Recipe "{recipe.name}" updated!', 'success')
        return redirect(url_for('recipes.recipe_view', id=recipe.id))

    return render_template(
        'recipe_form.html',
        recipe=recipe,
        aggregated=repo.aggregate(recipe),
        materials=materials_repo().list(),
        packaging_items=packaging_repo().list(),
        categories=sorted(VALID_RECIPE_CATEGORIES),
    )


@recipes_bp.route('/recipe/<int:id>/delete', methods=['POST'])
@login_required
def recipe_delete(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    name = recipe.name
    repo.delete(recipe)
    flash(f'Recipe "{name}" deleted!', 'success')
    return redirect(url_for('recipes.recipes_list'))


# ============================================
# INGREDIENT LINES
# ============================================

@recipes_bp.route('/recipe/<int:id>/ingredient/add', methods=['POST'])
@login_required
def recipe_ingredient_add(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)

    material = repo.materials.get(safe_int(request.form.get('material_id'), default=None))
    if material is None:
        flash('Invalid material selected', 'danger')
        return redirect(url_for('recipes.recipe_edit', id=id))

    amount, unit, error = _line_amount_and_unit()
    if error:
        flash(error, 'danger')
        return redirect(url_for('recipes.recipe_edit', id=id))

    repo.add_ingredient(recipe, material, amount, unit)
    return redirect(url_for('recipes.recipe_edit', id=id))


@recipes_bp.route('/recipe/<int:recipe_id>/ingredient/<int:line_id>/update', methods=['POST'])
@login_required
def recipe_ingredient_update(recipe_id, line_id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, recipe_id)
    line = repo.get_ingredient(recipe, line_id) or abort(404)

    material = None
    material_id = safe_int(request.form.get('material_id'), default=None)
    if material_id is not None and material_id != line.material_id:
        material = repo.materials.get(material_id)
        if material is None:
            flash('Invalid material selected', 'danger')
            return redirect(url_for('recipes.recipe_edit', id=recipe_id))

    amount, unit, error = _line_amount_and_unit(default_unit=line.unit)
    if error:
        flash(error, 'danger')
        return redirect(url_for('recipes.recipe_edit', id=recipe_id))

    repo.update_ingredient(recipe, line, material=material, amount=amount, unit=unit)
    return redirect(url_for('recipes.recipe_edit', id=recipe_id))


@recipes_bp.route('/recipe/<int:recipe_id>/ingredient/<int:line_id>/delete', methods=['POST'])
@login_required
def recipe_ingredient_delete(recipe_id, line_id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, recipe_id)
    line = repo.get_ingredient(recipe, line_id) or abort(404)
    repo.remove_ingredient(recipe, line)
    return redirect(url_for('recipes.recipe_edit', id=recipe_id))


# ============================================
# SCALING
# ============================================

@recipes_bp.route('/recipe/<int:id>/scale', methods=['GET', 'POST'])
@login_required
def recipe_scale(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    aggregated = repo.aggregate(recipe)
    scaled = None

    if request.method == 'POST':
        target = safe_float(request.form.get('target_weight'), default=0.0, max_val=MAX_NUMERIC_INPUT)
        try:
            scaled = scale_recipe(recipe, target, repo.materials.by_id())
        except ScalingError as e:
            flash(str(e), 'danger')
            return redirect(url_for('recipes.recipe_scale', id=id))

        if request.form.get('action') == 'save':
            repo.apply_scaled(recipe, scaled)
            flash(f'Recipe "{recipe.name}" scaled to {target:g} g', 'success')
            return redirect(url_for('recipes.recipe_view', id=id))

    return render_template(
        'recipe_scale.html',
        recipe=recipe,
        aggregated=aggregated,
        basis=scaling_basis(recipe),
        options=scaling_options(recipe),
        scaled=scaled,
        factor_label=format_scaling_factor(scaled.scaling_factor) if scaled else None,
    )


# ============================================
# LABEL / EXPORT
# ============================================

@recipes_bp.route('/recipe/<int:id>/label')
@login_required
def recipe_label(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    label = build_label(
        recipe,
        repo.materials.by_id(),
        product_name=sanitize_name(request.args.get('product_name'), max_length=MAX_LENGTHS['product_name']),
        brand_name=sanitize_name(request.args.get('brand_name'), max_length=MAX_LENGTHS['product_name']),
        net_weight=optional_positive(request.args.get('net_weight'), max_val=MAX_NUMERIC_INPUT),
        batch_number=sanitize_name(request.args.get('batch_number'), max_length=50),
        description=sanitize_text(request.args.get('description'), max_length=MAX_LENGTHS['notes']),
    )
    return render_template('label.html', recipe=recipe, label=label)


@recipes_bp.route('/recipe/<int:id>/export.csv')
@login_required
def recipe_export(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    body = rows_to_csv(prepare_export_rows(recipe, repo.materials.by_id()))
    filename = f"{sanitize_name(recipe.name, default='recipe').replace(' ', '_')}_cost_breakdown.csv"
    return csv_response(body, filename)


# ============================================
# VERSIONS
# ============================================

@recipes_bp.route('/recipe/<int:id>/versions')
@login_required
def recipe_versions(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    return render_template('recipe_versions.html', recipe=recipe, versions=repo.list_versions(recipe))


@recipes_bp.route('/recipe/<int:id>/versions/create', methods=['POST'])
@login_required
def recipe_version_create(id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    version = repo.create_version(
        recipe,
        name=sanitize_name(request.form.get('name'), max_length=MAX_LENGTHS['recipe_name']),
        notes=sanitize_text(request.form.get('notes'), max_length=MAX_LENGTHS['notes']),
    )
    flash(f'Saved version {version.version_number}', 'success')
    return redirect(url_for('recipes.recipe_versions', id=id))


@recipes_bp.route('/recipe/<int:id>/versions/<int:version_id>/revert', methods=['POST'])
@login_required
def recipe_version_revert(id, version_id):
    repo = recipes_repo()
    recipe = _get_recipe(repo, id)
    version = repo.get_version(recipe, version_id) or abort(404)
    repo.revert_to_version(recipe, version)
    flash(f'Reverted to version {version.version_number}', 'success')
    return redirect(url_for('recipes.recipe_view', id=id))
