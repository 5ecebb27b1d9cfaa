"""Shared pytest fixtures: an in-memory app, clients and test data helpers."""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from models import db, User  # noqa: E402
from services.cost import cost_per_gram  # noqa: E402
from services.types import IngredientLine, RawMaterialData, RecipeData  # noqa: E402


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    client.post('/login', data={'email': 'maker@example.com'})
    return client


@pytest.fixture
def user_id(app, auth_client):
    with app.app_context():
        return User.query.filter_by(email='maker@example.com').one().id


@pytest.fixture
def make_user(app):
    """Create a user directly and return its id."""
    def _make(email):
        with app.app_context():
            user = User(email=email)
            db.session.add(user)
            db.session.commit()
            return user.id
    return _make


def material(id, name, total_cost, total_quantity, unit='g'):
    """A RawMaterialData with its cost per gram filled in."""
    return RawMaterialData(
        id=id,
        name=name,
        total_cost=total_cost,
        total_quantity=total_quantity,
        unit=unit,
        cost_per_gram=cost_per_gram(total_cost, total_quantity, unit),
    )


def recipe(*lines, **fields):
    """A RecipeData from (material_id, amount, unit) tuples."""
    return RecipeData(
        name=fields.pop('name', 'Test Balm'),
        ingredients=[IngredientLine(material_id=m, amount=a, unit=u) for m, a, u in lines],
        **fields,
    )
