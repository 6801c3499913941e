"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from meal_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.adapters.supabase_shopping_check_repository import (
    SupabaseShoppingCheckRepository,
)
from meal_planner.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from meal_planner.config import Settings
from meal_planner.services.cache import Cache, InMemoryCache
from meal_planner.services.ingredients import IngredientService
from meal_planner.services.plan import MealPlanService
from meal_planner.services.recipes import RecipeService
from meal_planner.services.shopping import ShoppingListService
from meal_planner.services.stats import StatsService
from meal_planner.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cache: Cache
    ingredient_service: IngredientService
    recipe_service: RecipeService
    meal_plan_service: MealPlanService
    shopping_list_service: ShoppingListService
    stats_service: StatsService
    user_settings_service: UserSettingsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    meal_plan_repository = SupabaseMealPlanRepository(supabase_client)
    check_repository = SupabaseShoppingCheckRepository(supabase_client)
    user_settings_repository = SupabaseUserSettingsRepository(supabase_client)
    cache = InMemoryCache()
    user_settings_service = UserSettingsService(user_settings_repository)
    return AppContainer(
        settings=resolved_settings,
        cache=cache,
        ingredient_service=IngredientService(ingredient_repository),
        recipe_service=RecipeService(
            repository=recipe_repository, history=meal_plan_repository
        ),
        meal_plan_service=MealPlanService(
            repository=meal_plan_repository,
            recipes=recipe_repository,
            ingredients=ingredient_repository,
            settings=user_settings_service,
            cache=cache,
            cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
        ),
        shopping_list_service=ShoppingListService(
            entries=meal_plan_repository,
            checks=check_repository,
            cache=cache,
            cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
        ),
        stats_service=StatsService(meal_plan_repository),
        user_settings_service=user_settings_service,
    )
