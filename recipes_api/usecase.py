"""Application layer for recipe operations."""

from __future__ import annotations

from .models import Recipe
from .repository import RecipeRepository


class RecipeUsecase:
    """Recipe operations offered to the web layer."""

    def __init__(self, repository: RecipeRepository) -> None:
        self._repository = repository

    def get_all_recipes(self) -> list[Recipe]:
        """Return every recipe, newest first."""
        return self._repository.get_all_recipes()

    def get_recipe_by_id(self, recipe_id: int) -> Recipe:
        """Return one recipe; raises RecipeNotFoundError if absent."""
        return self._repository.get_recipe_by_id(recipe_id)

    def create_recipe(self, recipe: Recipe) -> Recipe:
        """Store a new recipe."""
        return self._repository.create_recipe(recipe)

    def update_recipe(self, recipe_id: int, recipe: Recipe) -> Recipe:
        """Update the non-empty fields of an existing recipe."""
        return self._repository.update_recipe(recipe_id, recipe)

    def delete_recipe(self, recipe_id: int) -> None:
        """Delete a recipe."""
        self._repository.delete_recipe(recipe_id)