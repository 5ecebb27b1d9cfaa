"""
Auth Routes

Sign in by email (no password; authentication proper is handled in front
of this app), sign out, and the display currency preference.
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from constants import CURRENCIES
from models import db, User
from utils import sanitize_email

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


def _safe_next(target):
    # Only allow local paths as redirect targets
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('main.index')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = sanitize_email(request.form.get('email', ''))
        if not email:
            flash('A valid email is required', 'danger')
            return render_template('login.html'), 400

        user = User.query.filter_by(email=email).first()
        if user is None:
            user = User(email=email)
            db.session.add(user)
            db.session.commit()
            logger.info('Created user %s', user.id)

        session.clear()
        session['user_id'] = user.id
        flash(f'Signed in as {email}', 'success')
        return redirect(_safe_next(request.args.get('next')))

    return render_template('login.html')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    flash('Signed out', 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/currency', methods=['POST'])
def set_currency():
    currency = request.form.get('currency', '').upper()
    if currency in CURRENCIES:
        session['currency'] = currency
    else:
        flash('Unsupported currency', 'danger')
    return redirect(_safe_next(request.form.get('next')))
