from decimal import Decimal

from models import FixedCosts
from services import (
    LineStatus,
    Margin,
    compute_line_cost,
    compute_margin,
    compute_recipe_cost,
    line_status,
    price_per_base_unit,
    recalculate_saved_recipe,
    round1,
)
from tests.factories import CHEESE, EGGS, FLOUR, MILK, make_ingredient, make_line


def test_kilo_price_costed_per_gram():
    inventory = [make_ingredient(1, 'Harina', '100', '1', 'kg')]
    line = make_line(1, 1, '500', 'g')
    assert compute_line_cost(line, inventory) == 50


def test_line_cost_in_larger_usage_unit(inventory):
    # 0.5 l of milk bought at 900 per litre
    assert compute_line_cost(make_line(1, MILK, '0.5', 'l'), inventory) == 450
    # 10 g of cheese bought at 5000 per 500 g
    assert compute_line_cost(make_line(2, CHEESE, '10', 'g'), inventory) == 100
    # 2 eggs from a 30 pack at 1800
    assert compute_line_cost(make_line(3, EGGS, '2', 'u'), inventory) == 120


def test_unset_reference_costs_nothing(inventory):
    line = make_line(1, None, '500', 'g')
    assert compute_line_cost(line, inventory) == 0
    assert line_status(line, inventory) is LineStatus.UNSET


def test_orphaned_reference_costs_nothing(inventory):
    line = make_line(1, 999, '500', 'g')
    assert compute_line_cost(line, inventory) == 0
    assert line_status(line, inventory) is LineStatus.ORPHANED


def test_unit_mismatch_costs_nothing(inventory):
    line = make_line(1, FLOUR, '500', 'ml')
    assert compute_line_cost(line, inventory) == 0
    assert line_status(line, inventory) is LineStatus.UNIT_MISMATCH

    line = make_line(2, EGGS, '1', 'kg')
    assert compute_line_cost(line, inventory) == 0


def test_empty_package_costs_nothing():
    inventory = [make_ingredient(1, 'Aceite', '3000', '0', 'l')]
    line = make_line(1, 1, '100', 'ml')
    assert line_status(line, inventory) is LineStatus.OK
    assert compute_line_cost(line, inventory) == 0


def test_zero_usage_costs_nothing(inventory):
    assert compute_line_cost(make_line(1, FLOUR, '0', 'g'), inventory) == 0


def test_line_cost_accepts_plain_record_list(inventory):
    as_list = list(inventory)
    line = make_line(1, FLOUR, '250', 'g')
    assert compute_line_cost(line, as_list) == compute_line_cost(line, inventory) == 300


def test_recipe_cost_adds_fixed_costs(inventory, pancake_lines, fixed_costs):
    cost = compute_recipe_cost(pancake_lines, inventory, fixed_costs)
    assert cost.ingredients_cost == 870
    assert cost.total_cost == 950
    assert [lc.cost for lc in cost.lines] == [300, 450, 120]
    assert all(lc.status is LineStatus.OK for lc in cost.lines)
    assert not cost.has_warnings


def test_recipe_cost_is_order_independent(inventory, pancake_lines, fixed_costs):
    forward = compute_recipe_cost(pancake_lines, inventory, fixed_costs)
    backward = compute_recipe_cost(tuple(reversed(pancake_lines)), inventory, fixed_costs)
    assert forward.total_cost == backward.total_cost


def test_recipe_cost_flags_bad_lines(inventory):
    lines = (
        make_line(1, FLOUR, '100', 'g'),
        make_line(2, FLOUR, '100', 'ml'),
        make_line(3, 999, '1', 'u'),
        make_line(4, None, '0', 'g'),
    )
    cost = compute_recipe_cost(lines, inventory)
    assert cost.total_cost == 120
    assert [lc.status for lc in cost.lines] == [
        LineStatus.OK, LineStatus.UNIT_MISMATCH, LineStatus.ORPHANED, LineStatus.UNSET,
    ]
    assert cost.has_warnings


def test_empty_recipe(inventory):
    cost = compute_recipe_cost((), inventory, FixedCosts(packaging=Decimal('35')))
    assert cost.ingredients_cost == 0
    assert cost.total_cost == 35


def test_margin():
    assert compute_margin(Decimal('80'), Decimal('100')) == Margin(Decimal('20'), Decimal('20.0'))


def test_margin_without_sale_price():
    assert compute_margin(Decimal('80'), Decimal('0')) == Margin(Decimal('-80'), Decimal('0'))
    assert compute_margin(Decimal('80'), Decimal('-5')).margin_percent == 0


def test_negative_margin_is_allowed():
    result = compute_margin(Decimal('150'), Decimal('100'))
    assert result.margin == -50
    assert result.margin_percent == Decimal('-50.0')


def test_margin_percent_rounds_to_one_decimal():
    # 550 / 1500 = 36.666...%
    assert compute_margin(Decimal('950'), Decimal('1500')).margin_percent == Decimal('36.7')


def test_round1_is_half_up():
    assert round1(Decimal('20.05')) == Decimal('20.1')
    assert round1(Decimal('20.04')) == Decimal('20.0')
    assert round1(Decimal('0.25')) == Decimal('0.3')


def test_price_per_base_unit(inventory):
    assert price_per_base_unit(inventory.get(FLOUR)) == Decimal('1.2')
    assert price_per_base_unit(inventory.get(EGGS)) == 60
    assert price_per_base_unit(make_ingredient(9, 'Vacío', '10', '0', 'kg')) == 0


def test_out_of_range_package_costs_nothing():
    inventory = [make_ingredient(1, 'Azafrán', '1200', '1e-999999', 'g')]
    line = make_line(1, 1, '1', 'g')
    assert compute_line_cost(line, inventory) == 0
    assert price_per_base_unit(inventory[0]) == 0
    cost = compute_recipe_cost([line], inventory, FixedCosts(packaging=Decimal('50')))
    assert cost.total_cost == 50


def test_margin_percent_beyond_precision_is_zero():
    result = compute_margin(Decimal('1e27'), Decimal('1'))
    assert result.margin == Decimal('1') - Decimal('1e27')
    assert result.margin_percent == 0


def test_saved_recipe_fields(pancakes):
    assert pancakes.total_cost == 950
    assert pancakes.margin == 550
    assert pancakes.margin_percent == Decimal('36.7')
    assert pancakes.sale_price == 1500
    assert len(pancakes.recipe_lines) == 3


def test_recalculate_uses_current_prices(inventory, pancakes):
    dearer = inventory.update(FLOUR, purchase_price=Decimal('2400'))
    refreshed = recalculate_saved_recipe(pancakes, dearer)
    # flour line goes from 300 to 600
    assert refreshed.total_cost == 1250
    assert refreshed.margin == 250
    assert refreshed.margin_percent == Decimal('16.7')
    assert refreshed.recipe_lines == pancakes.recipe_lines
    assert refreshed.name == pancakes.name
    assert refreshed.date == pancakes.date


def test_recalculate_is_idempotent(inventory, pancakes):
    once = recalculate_saved_recipe(pancakes, inventory)
    twice = recalculate_saved_recipe(once, inventory)
    assert once == twice
    assert once.to_dict() == twice.to_dict()
