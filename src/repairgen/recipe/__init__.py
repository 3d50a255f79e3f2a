"""Shape recipes and their execution."""

from .engine import RecipeEngine, execute_recipe, normalize_recipe
from .examples import EXAMPLE_RECIPES

__all__ = ["RecipeEngine", "execute_recipe", "normalize_recipe", "EXAMPLE_RECIPES"]
