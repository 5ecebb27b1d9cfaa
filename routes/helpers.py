"""
Route Helpers

Signed-in user lookup, display currency preference, and per-request
repository construction.
"""

from functools import wraps

from flask import Response, current_app, flash, g, redirect, request, session, url_for

from constants import CURRENCIES, MAX_NUMERIC_INPUT
from models import db
from services.currency import Money
from services.repository import (
    InventoryRepository, MaterialRepository, PackagingRepository,
    PriceRecordRepository, RecipeRepository,
)
from utils import safe_float


def signed_in_user_id():
    return session.get('user_id')


def login_required(view):
    """Redirect to the sign-in page unless a user id is in the session."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        user_id = signed_in_user_id()
        if user_id is None:
            flash('Please sign in first', 'warning')
            return redirect(url_for('auth.login', next=request.path))
        g.user_id = user_id
        return view(*args, **kwargs)
    return wrapped


def display_currency():
    """Session currency preference, falling back to the configured default."""
    currency = session.get('currency') or current_app.config.get('DEFAULT_CURRENCY', 'USD')
    return currency if currency in CURRENCIES else 'USD'


def form_money(field, default=0.0):
    """A cost typed into a form, tagged with the display currency."""
    amount = safe_float(request.form.get(field), default=default, min_val=0, max_val=MAX_NUMERIC_INPUT)
    if amount is None:
        return None
    return Money(amount, display_currency())


def materials_repo():
    return MaterialRepository(db.session, g.user_id)


def recipes_repo():
    return RecipeRepository(db.session, g.user_id)


def packaging_repo():
    return PackagingRepository(db.session, g.user_id)


def inventory_repo():
    return InventoryRepository(db.session, g.user_id)


def price_records_repo():
    return PriceRecordRepository(db.session, g.user_id)


def csv_response(body, filename):
    """Serve CSV text as a file download."""
    return Response(
        body,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{filename}"'},
    )
