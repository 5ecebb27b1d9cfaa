"""
Formulary Flask application.

create_app() builds the app for an environment name from config.py;
wsgi.py exposes the production instance.
"""

import logging
import sqlite3

from flask import Flask
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import get_config
from models import db
from routes import register_blueprints
from routes.helpers import display_currency, signed_in_user_id
from services.currency import convert_currency, currency_options, format_currency
from services.units import format_weight
from constants import CANONICAL_CURRENCY, WEIGHT_UNITS, INVENTORY_UNITS
from utils import configure_logging

logger = logging.getLogger(__name__)

migrate = Migrate()


# Enable SQLite foreign key enforcement so ON DELETE rules apply
@event.listens_for(Engine, 'connect')
def set_sqlite_pragma(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def money_filter(amount):
    """Render a stored USD amount in the session's display currency."""
    return format_currency(amount or 0.0, display_currency())


def in_currency_filter(amount):
    """Numeric value of a stored USD amount in the display currency, for form fields."""
    if amount is None:
        return ''
    return round(convert_currency(amount, CANONICAL_CURRENCY, display_currency()), 4)


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    configure_logging(app.config.get('LOG_LEVEL'))

    db.init_app(app)
    migrate.init_app(app, db)

    # Register Jinja filters for money and weight display
    app.jinja_env.filters['money'] = money_filter
    app.jinja_env.filters['in_currency'] = in_currency_filter
    app.jinja_env.filters['weight'] = format_weight

    @app.context_processor
    def inject_display_settings():
        return {
            'currency': display_currency(),
            'currency_options': currency_options(),
            'weight_units': WEIGHT_UNITS,
            'inventory_units': INVENTORY_UNITS,
            'signed_in': signed_in_user_id() is not None,
        }

    register_blueprints(app)
    logger.debug('Application created for %s', env or 'default environment')
    return app


def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
