import logging

import pytest

from constants import WEIGHT_UNITS
from services.units import format_weight, from_grams, normalize_unit, to_grams


@pytest.mark.parametrize('value, unit, expected', [
    (5, 'g', 5),
    (1.5, 'kg', 1500),
    (2, 'oz', 56.699),
    (1, 'lb', 453.592),
])
def test_to_grams_factors(value, unit, expected):
    assert to_grams(value, unit) == pytest.approx(expected)


@pytest.mark.parametrize('unit', WEIGHT_UNITS)
def test_zero_is_zero_in_every_unit(unit):
    assert to_grams(0, unit) == 0


def test_sign_is_not_validated():
    assert to_grams(-2, 'kg') == -2000


def test_aliases_are_normalized():
    assert normalize_unit('Grams') == 'g'
    assert normalize_unit(' LBS ') == 'lb'
    assert normalize_unit('Ounce') == 'oz'
    assert to_grams(1, 'Kilogram') == 1000


def test_unknown_unit_is_treated_as_grams(caplog):
    with caplog.at_level(logging.WARNING, logger='services.units'):
        assert to_grams(7, 'stone') == 7
    assert 'stone' in caplog.text


def test_volume_units_are_not_converted():
    assert to_grams(250, 'ml') == 250


def test_from_grams_round_trip():
    assert from_grams(to_grams(3, 'oz'), 'oz') == pytest.approx(3)
    assert from_grams(2500, 'kg') == 2.5


def test_format_weight():
    assert format_weight(12.5, 'g') == '12.50 g'
    assert format_weight(1, 'pounds') == '1.00 lb'
