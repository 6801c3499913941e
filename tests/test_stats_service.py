"""Tests for range analytics."""

from datetime import date, timedelta

from meal_planner.domain.recipes import Recipe
from meal_planner.services.stats import StatsService, summarize_range
from tests.conftest import (
    CHICKEN,
    CHICKEN_RICE,
    EGG,
    OATS,
    OMELETTE,
    PORRIDGE,
    RICE,
    InMemoryMealPlanRepository,
    line,
    make_entry,
)

START = date(2024, 3, 1)
END = date(2024, 3, 7)


def test_summary_totals_cost_and_calories() -> None:
    entries = [
        make_entry(1, START, "breakfast", recipe=OMELETTE, is_eaten=True),
        make_entry(2, START, "lunch", recipe=CHICKEN_RICE, servings=2),
        make_entry(3, END, "snack", custom_calories=150, is_eaten=True),
        make_entry(4, END + timedelta(days=1), custom_calories=999),
    ]

    summary = summarize_range(entries, START, END)

    assert len(summary.daily) == 7
    assert summary.daily[0].totals.calories == 724
    assert summary.daily[1].totals.calories == 0
    assert summary.total_calories_planned == 874
    assert summary.total_calories_eaten == 349
    assert summary.total_cost == 9.4


def test_top_ingredients_sorted_by_amount_with_day_counts() -> None:
    entries = [
        make_entry(1, START, recipe=CHICKEN_RICE, servings=2),
        make_entry(2, START + timedelta(days=1), recipe=CHICKEN_RICE),
        make_entry(3, START + timedelta(days=1), "breakfast", recipe=PORRIDGE),
    ]

    summary = summarize_range(entries, START, END)

    usage = [
        (item.ingredient_id, item.total_amount, item.used_days_count)
        for item in summary.most_used_ingredients
    ]
    assert usage == [(CHICKEN.id, 300, 2), (RICE.id, 225, 2), (OATS.id, 80, 1)]


def test_top_lists_are_capped_and_stable() -> None:
    recipes = [
        Recipe(id=100 + index, name=f"Recipe {index}", ingredients=(line(EGG, 10),))
        for index in range(10)
    ]
    entries = [
        make_entry(index, START, recipe=recipe) for index, recipe in enumerate(recipes)
    ]
    entries.append(make_entry(50, START, recipe=recipes[9]))

    summary = summarize_range(entries, START, END)

    names = [item.name for item in summary.most_cooked_recipes]
    assert len(names) == 8
    assert names[0] == "Recipe 9"
    assert names[1:] == [f"Recipe {index}" for index in range(7)]


def test_service_uses_window_ending_today(
    meal_plan_repository: InMemoryMealPlanRepository,
) -> None:
    today = date(2024, 3, 31)
    meal_plan_repository.entries = {
        1: make_entry(1, today - timedelta(days=6), custom_calories=100),
        2: make_entry(2, today - timedelta(days=7), custom_calories=500),
    }

    summary = StatsService(meal_plan_repository).get_summary(7, today=today)

    assert summary.start == date(2024, 3, 25)
    assert summary.end == today
    assert summary.total_calories_planned == 100
