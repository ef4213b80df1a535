"""Domain model for recipes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


class RecipeNotFoundError(LookupError):
    """Raised when no recipe exists with the requested id."""

    def __init__(self, recipe_id: int) -> None:
        super().__init__(f"record not found: recipe {recipe_id}")
        self.recipe_id = recipe_id


@dataclass
class Recipe:
    """A single recipe as stored in the ``recipes`` table."""

    id: int | None = None
    title: str = ""
    making_time: str = ""
    serves: str = ""
    ingredients: str = ""
    cost: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the recipe as a JSON-ready mapping."""
        return {
            "id": self.id,
            "title": self.title,
            "making_time": self.making_time,
            "serves": self.serves,
            "ingredients": self.ingredients,
            "cost": self.cost,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }