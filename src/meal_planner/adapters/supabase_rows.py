"""Row parsing and hydration helpers shared by the Supabase repositories."""

from collections.abc import Iterable
from datetime import date

from supabase import Client

from meal_planner.domain.ingredients import Ingredient, IngredientLine
from meal_planner.domain.meals import DEFAULT_PERSON, MealEntry
from meal_planner.domain.recipes import FrequentAddon, Recipe


def parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=int(row["id"]),
        name=str(row["name"]),
        category=_optional_str(row.get("category")),
        calories=_float(row.get("calories")),
        protein=_float(row.get("protein")),
        carbs=_float(row.get("carbs")),
        fat=_float(row.get("fat")),
        unit=str(row.get("unit") or "g"),
        unit_weight=_optional_float(row.get("unit_weight")),
        unit_description=_optional_str(row.get("unit_description")),
        price=_float(row.get("price")),
        image_url=_optional_str(row.get("image_url")),
    )


def parse_entry(
    row: dict[str, object],
    recipe: Recipe | None,
    lines: Iterable[IngredientLine],
) -> MealEntry:
    recipe_id = row.get("recipe_id")
    return MealEntry(
        id=int(row["id"]),
        day=date.fromisoformat(str(row["date"])),
        meal_type=str(row["meal_type"]),
        person=str(row.get("person") or DEFAULT_PERSON),
        recipe_id=int(recipe_id) if recipe_id is not None else None,
        recipe=recipe,
        custom_name=_optional_str(row.get("custom_name")),
        custom_calories=_optional_float(row.get("custom_calories")),
        custom_protein=_optional_float(row.get("custom_protein")),
        custom_carbs=_optional_float(row.get("custom_carbs")),
        custom_fat=_optional_float(row.get("custom_fat")),
        servings=_float(row.get("servings"), default=1.0),
        is_eaten=bool(row.get("is_eaten")),
        ingredients=tuple(lines),
    )


def fetch_ingredients(
    client: Client, ingredient_ids: Iterable[int]
) -> dict[int, Ingredient]:
    """Return ingredients keyed by id for a set of ids."""
    ids = sorted(set(ingredient_ids))
    if not ids:
        return {}
    response = client.table("ingredients").select("*").in_("id", ids).execute()
    ingredients = [parse_ingredient(row) for row in response.data or []]
    return {ingredient.id: ingredient for ingredient in ingredients}


def fetch_recipes(
    client: Client, recipe_ids: Iterable[int] | None = None
) -> list[Recipe]:
    """Return hydrated recipes, every recipe when no ids are given."""
    query = client.table("recipes").select("*")
    if recipe_ids is not None:
        ids = sorted(set(recipe_ids))
        if not ids:
            return []
        query = query.in_("id", ids)
    recipe_rows = query.order("id").execute().data or []
    if not recipe_rows:
        return []
    found_ids = [int(row["id"]) for row in recipe_rows]
    line_rows = (
        client.table("recipe_ingredients")
        .select("*")
        .in_("recipe_id", found_ids)
        .order("id")
        .execute()
        .data
        or []
    )
    addon_rows = (
        client.table("recipe_frequent_addons")
        .select("*")
        .in_("recipe_id", found_ids)
        .order("id")
        .execute()
        .data
        or []
    )
    ingredients = fetch_ingredients(
        client, [int(row["ingredient_id"]) for row in [*line_rows, *addon_rows]]
    )
    lines: dict[int, list[IngredientLine]] = {}
    for row in line_rows:
        lines.setdefault(int(row["recipe_id"]), []).append(
            parse_line(row, ingredients)
        )
    addons: dict[int, list[FrequentAddon]] = {}
    for row in addon_rows:
        ingredient_id = int(row["ingredient_id"])
        addons.setdefault(int(row["recipe_id"]), []).append(
            FrequentAddon(
                ingredient_id=ingredient_id,
                amount=_float(row.get("amount")),
                ingredient=ingredients.get(ingredient_id),
            )
        )
    return [
        _parse_recipe(
            row,
            lines.get(int(row["id"]), []),
            addons.get(int(row["id"]), []),
        )
        for row in recipe_rows
    ]


def parse_line(
    row: dict[str, object], ingredients: dict[int, Ingredient]
) -> IngredientLine:
    ingredient_id = int(row["ingredient_id"])
    return IngredientLine(
        ingredient_id=ingredient_id,
        amount=_float(row.get("amount")),
        ingredient=ingredients.get(ingredient_id),
    )


def _parse_recipe(
    row: dict[str, object],
    lines: list[IngredientLine],
    addons: list[FrequentAddon],
) -> Recipe:
    prep_time = row.get("prep_time")
    return Recipe(
        id=int(row["id"]),
        name=str(row["name"]),
        servings=_float(row.get("servings"), default=1.0),
        tags=tuple(str(tag) for tag in row.get("tags") or []),
        description=_optional_str(row.get("description")),
        instructions=_optional_str(row.get("instructions")),
        prep_time=int(prep_time) if prep_time is not None else None,
        image_url=_optional_str(row.get("image_url")),
        ingredients=tuple(lines),
        frequent_addons=tuple(addons),
    )


def _float(value: object, default: float = 0.0) -> float:
    if value is None:
        return default
    return float(value)


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
