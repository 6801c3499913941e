"""Tests for nutrition aggregation."""

from datetime import date

import pytest

from meal_planner.domain.ingredients import IngredientLine
from meal_planner.domain.recipes import Recipe
from meal_planner.services.nutrition import (
    aggregate,
    day_totals,
    entry_totals,
    range_totals,
)
from meal_planner.services.recipes import recipe_stats
from tests.conftest import CHICKEN, CHICKEN_RICE, EGG, OMELETTE, RICE, line, make_entry

DAY = date(2024, 3, 4)
SCENARIO_RECIPE = Recipe(
    id=20, name="Chicken rice", servings=2, ingredients=(line(CHICKEN, 200),)
)


def test_recipe_stat_calories_per_serving() -> None:
    stats = recipe_stats(SCENARIO_RECIPE, [])

    assert stats.calories == 165


def test_entry_scaled_by_recipe_servings() -> None:
    entry = make_entry(1, DAY, recipe=SCENARIO_RECIPE, servings=1)

    assert entry_totals(entry).calories == pytest.approx(165)


def test_override_amount_is_authoritative_and_rounds_half_up() -> None:
    entry = make_entry(
        1, DAY, recipe=SCENARIO_RECIPE, servings=1, ingredients=(line(CHICKEN, 100),)
    )

    totals = entry_totals(entry)

    assert totals.calories == pytest.approx(82.5)
    assert totals.rounded().calories == 83


def test_custom_entry_contributes_calories_times_servings() -> None:
    entry = make_entry(1, DAY, custom_calories=300, servings=2)

    assert day_totals([entry], DAY).calories == 600


def test_entry_matches_recipe_scaled_by_servings_ratio() -> None:
    entry = make_entry(1, DAY, recipe=CHICKEN_RICE, servings=3)

    expected = aggregate(CHICKEN_RICE.ingredients, 3 / 2)

    assert entry_totals(entry) == expected


def test_aggregate_skips_missing_ingredients() -> None:
    lines = [line(RICE, 100), IngredientLine(ingredient_id=99, amount=500)]

    totals = aggregate(lines, 1)

    assert totals.calories == pytest.approx(130)


def test_aggregate_is_order_independent() -> None:
    lines = [line(CHICKEN, 130), line(RICE, 70), line(EGG, 55)]

    forward = aggregate(lines, 0.7)
    backward = aggregate(list(reversed(lines)), 0.7)

    assert forward.calories == pytest.approx(backward.calories)
    assert forward.fat == pytest.approx(backward.fat)
    assert forward.price == pytest.approx(backward.price)


def test_day_totals_filter_by_person_and_eaten() -> None:
    entries = [
        make_entry(1, DAY, "breakfast", recipe=OMELETTE, is_eaten=True),
        make_entry(2, DAY, "lunch", recipe=CHICKEN_RICE, person="B", is_eaten=True),
        make_entry(3, DAY, "dinner", custom_calories=400),
        make_entry(4, date(2024, 3, 5), custom_calories=999),
    ]

    assert day_totals(entries, DAY).calories == 199 + 263 + 400
    assert day_totals(entries, DAY, person="A").calories == 199 + 400
    assert day_totals(entries, DAY, eaten_only=True).calories == 199 + 263
    assert day_totals(entries, DAY, person="B", eaten_only=True).calories == 263


def test_day_totals_round_only_the_final_sum() -> None:
    entries = [
        make_entry(1, DAY, custom_calories=100.4),
        make_entry(2, DAY, custom_calories=100.4),
    ]

    assert day_totals(entries, DAY).calories == 201


def test_range_totals_include_uneaten_entries_in_range() -> None:
    entries = [
        make_entry(1, date(2024, 3, 1), custom_calories=100),
        make_entry(2, date(2024, 3, 3), custom_calories=200, is_eaten=True),
        make_entry(3, date(2024, 3, 9), custom_calories=400),
    ]

    totals = range_totals(entries, date(2024, 3, 1), date(2024, 3, 7))

    assert totals.calories == 300


def test_prices_sum_per_entry() -> None:
    entry = make_entry(1, DAY, recipe=CHICKEN_RICE, servings=2)

    assert entry_totals(entry).rounded().price == pytest.approx(7.2)
