"""JSON serialization of domain objects."""

from dataclasses import asdict

from meal_planner.domain.ingredients import Ingredient, IngredientLine
from meal_planner.domain.meals import MealEntry
from meal_planner.domain.nutrition import NutritionTotals
from meal_planner.domain.recipes import FrequentAddon, Recipe, RecipeWithStats
from meal_planner.domain.shopping import ShoppingCategory, ShoppingListItem
from meal_planner.domain.stats import DaySummary, PersonDaySummary, RangeSummary
from meal_planner.services.nutrition import entry_totals


def serialize_ingredient(ingredient: Ingredient) -> dict[str, object]:
    return asdict(ingredient)


def serialize_totals(totals: NutritionTotals) -> dict[str, object]:
    return asdict(totals)


def serialize_line(line: IngredientLine | FrequentAddon) -> dict[str, object]:
    return {
        "ingredient_id": line.ingredient_id,
        "amount": line.amount,
        "ingredient": (
            serialize_ingredient(line.ingredient) if line.ingredient else None
        ),
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "servings": recipe.servings,
        "tags": list(recipe.tags),
        "description": recipe.description,
        "instructions": recipe.instructions,
        "prep_time": recipe.prep_time,
        "image_url": recipe.image_url,
        "ingredients": [serialize_line(line) for line in recipe.ingredients],
        "frequent_addons": [serialize_line(addon) for addon in recipe.frequent_addons],
    }


def serialize_recipe_with_stats(item: RecipeWithStats) -> dict[str, object]:
    return {**serialize_recipe(item.recipe), "stats": asdict(item.stats)}


def serialize_entry(entry: MealEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "date": entry.day.isoformat(),
        "meal_type": entry.meal_type,
        "person": entry.person,
        "name": entry.recipe.name if entry.recipe else entry.custom_name,
        "recipe_id": entry.recipe_id,
        "recipe": serialize_recipe(entry.recipe) if entry.recipe else None,
        "custom_name": entry.custom_name,
        "custom_calories": entry.custom_calories,
        "custom_protein": entry.custom_protein,
        "custom_carbs": entry.custom_carbs,
        "custom_fat": entry.custom_fat,
        "servings": entry.servings,
        "is_eaten": entry.is_eaten,
        "ingredients": [serialize_line(line) for line in entry.ingredients],
        "totals": serialize_totals(entry_totals(entry).rounded()),
    }


def _serialize_person(summary: PersonDaySummary) -> dict[str, object]:
    return {
        "person": summary.person,
        "planned": serialize_totals(summary.planned),
        "consumed": serialize_totals(summary.consumed),
        "remaining": serialize_totals(summary.remaining),
        "entry_ids": [entry.id for entry in summary.entries],
    }


def serialize_day(summary: DaySummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "totals": serialize_totals(summary.totals),
        "consumed": serialize_totals(summary.consumed),
        "targets": asdict(summary.targets),
        "people": [_serialize_person(person) for person in summary.people],
        "entries": [serialize_entry(entry) for entry in summary.entries],
    }


def serialize_shopping_item(item: ShoppingListItem) -> dict[str, object]:
    return {**asdict(item), "pieces": item.pieces}


def serialize_shopping_category(category: ShoppingCategory) -> dict[str, object]:
    return {
        "name": category.name,
        "items": [serialize_shopping_item(item) for item in category.items],
    }


def serialize_range(summary: RangeSummary) -> dict[str, object]:
    return {
        "start_date": summary.start.isoformat(),
        "end_date": summary.end.isoformat(),
        "days": len(summary.daily),
        "total_cost": summary.total_cost,
        "total_calories_planned": summary.total_calories_planned,
        "total_calories_eaten": summary.total_calories_eaten,
        "daily": [
            {"date": item.day.isoformat(), **serialize_totals(item.totals)}
            for item in summary.daily
        ],
        "most_used_ingredients": [
            asdict(usage) for usage in summary.most_used_ingredients
        ],
        "most_cooked_recipes": [asdict(usage) for usage in summary.most_cooked_recipes],
    }
