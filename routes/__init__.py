"""
Routes Package

Flask blueprints for the web interface.
"""

from .auth import auth_bp
from .main import main_bp
from .materials import materials_bp
from .recipes import recipes_bp
from .packaging import packaging_bp
from .inventory import inventory_bp
from .pricing import pricing_bp

BLUEPRINTS = [
    auth_bp,
    main_bp,
    materials_bp,
    recipes_bp,
    packaging_bp,
    inventory_bp,
    pricing_bp,
]


def register_blueprints(app):
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
