from types import SimpleNamespace

import pytest

from models import db, RawMaterial, RecipeIngredient
from services.pricing import calculate_price
from services.repository import (
    MaterialRepository, PriceRecordRepository, RecipeRepository,
)
from services.scaling import scale_recipe


@pytest.fixture
def repos(app, make_user):
    owner = make_user('owner@example.com')
    other = make_user('other@example.com')
    with app.app_context():
        yield SimpleNamespace(
            materials=MaterialRepository(db.session, owner),
            recipes=RecipeRepository(db.session, owner),
            prices=PriceRecordRepository(db.session, owner),
            other_materials=MaterialRepository(db.session, other),
            other_recipes=RecipeRepository(db.session, other),
        )


@pytest.fixture
def shea(repos):
    return repos.materials.save(RawMaterial(name='Shea Butter', total_cost=15.99, total_quantity=500, unit='g'))


@pytest.fixture
def balm(repos, shea):
    recipe = repos.recipes.create(name='Lip Balm')
    repos.recipes.add_ingredient(recipe, shea, 100, 'g')
    return recipe


def test_save_derives_cost_per_gram(repos):
    wax = repos.materials.save(RawMaterial(name='Beeswax', total_cost=12, total_quantity=1, unit='kg'))
    assert wax.cost_per_gram == pytest.approx(0.012)


def test_rows_are_scoped_to_their_owner(repos, shea, balm):
    assert repos.other_materials.get(shea.id) is None
    assert repos.other_materials.list() == []
    assert repos.other_recipes.get(balm.id) is None
    assert repos.recipes.get(balm.id) is balm


def test_add_ingredient_caches_totals(repos, balm):
    line = balm.ingredients[0]
    assert line.material_name == 'Shea Butter'
    assert line.amount_in_grams == 100
    assert line.cost == pytest.approx(3.198)
    assert balm.total_cost == pytest.approx(3.198)
    assert balm.original_batch_size == pytest.approx(100)


def test_aggregate_uses_current_prices(repos, shea, balm):
    shea.total_cost = 31.98
    repos.materials.save(shea)

    assert repos.recipes.aggregate(balm).total_cost == pytest.approx(6.396)
    assert balm.total_cost == pytest.approx(3.198)

    repos.recipes.refresh_totals(balm)
    assert balm.total_cost == pytest.approx(6.396)


def test_composition_change_resets_basis(repos, shea, balm):
    repos.recipes.add_ingredient(balm, shea, 50, 'g')
    assert balm.original_batch_size == pytest.approx(150)
    assert [line.position for line in balm.ingredients] == [0, 1]

    repos.recipes.remove_ingredient(balm, balm.ingredients[0])
    assert balm.original_batch_size == pytest.approx(50)
    assert [line.position for line in balm.ingredients] == [0]


def test_apply_scaled_does_not_compound(repos, balm):
    scaled = scale_recipe(balm, 250, repos.materials.by_id())
    repos.recipes.apply_scaled(balm, scaled)
    assert balm.ingredients[0].amount == pytest.approx(250)
    assert balm.batch_size == 250
    assert balm.total_cost == pytest.approx(7.995)
    assert balm.original_batch_size == 250

    again = scale_recipe(balm, 500, repos.materials.by_id())
    assert again.scaling_factor == pytest.approx(2)
    assert again.ingredients[0].amount == pytest.approx(500)


def test_versions_snapshot_and_revert(repos, shea, balm):
    first = repos.recipes.create_version(balm)
    repos.recipes.add_ingredient(balm, shea, 25, 'g')
    second = repos.recipes.create_version(balm, name='With extra butter')

    assert (first.version_number, second.version_number) == (1, 2)
    assert first.name == 'Version 1'
    assert [v.version_number for v in repos.recipes.list_versions(balm)] == [2, 1]

    repos.recipes.revert_to_version(balm, first)
    assert len(balm.ingredients) == 1
    assert balm.ingredients[0].amount == 100
    assert balm.total_cost == pytest.approx(3.198)


def test_deleting_material_orphans_lines(repos, shea, balm):
    line_id = balm.ingredients[0].id
    repos.materials.delete(shea)
    db.session.expire_all()

    line = db.session.get(RecipeIngredient, line_id)
    assert line.material_id is None
    assert line.material_name == 'Shea Butter'

    aggregated = repos.recipes.aggregate(repos.recipes.get(balm.id))
    assert aggregated.total_cost == 0
    assert aggregated.lines[0].missing


def test_save_price_breakdown(repos, balm):
    breakdown = calculate_price(balm.total_cost, 1, 0.5, 20, number_of_units=2)
    record = repos.prices.save_breakdown(breakdown, 'Lip Balm Tin', recipe=balm)
    assert record.recipe_id == balm.id
    assert record.final_price == pytest.approx(breakdown.final_price)
    assert record.price_per_unit == pytest.approx(breakdown.final_price / 2)
    assert record.cost_per_unit == pytest.approx(breakdown.total_cost / 2)

    later = repos.prices.save_breakdown(calculate_price(5), 'Sample')
    assert [r.id for r in repos.prices.list()][0] == later.id
