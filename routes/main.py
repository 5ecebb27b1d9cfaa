"""
Dashboard Route
"""

from flask import Blueprint, render_template

from .helpers import login_required, materials_repo, packaging_repo, recipes_repo

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
@login_required
def index():
    repo = recipes_repo()
    return render_template(
        'index.html',
        summaries=repo.aggregate_many(repo.list()),
        material_count=len(materials_repo().list()),
        packaging_count=len(packaging_repo().list()),
    )
