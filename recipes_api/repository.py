"""Recipe storage: the repository interface and its SQL implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine, Row

from .models import Recipe, RecipeNotFoundError

metadata = MetaData()

recipes_table = Table(
    "recipes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(100), nullable=False),
    Column("making_time", String(100), nullable=False),
    Column("serves", String(100), nullable=False),
    Column("ingredients", String(300), nullable=False),
    Column("cost", Integer, nullable=False),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
)

_CONTENT_FIELDS = ("title", "making_time", "serves", "ingredients", "cost")


class RecipeRepository(ABC):
    """Storage operations the application needs for recipes."""

    @abstractmethod
    def get_all_recipes(self) -> list[Recipe]:
        """Return every recipe, newest first."""

    @abstractmethod
    def get_recipe_by_id(self, recipe_id: int) -> Recipe:
        """Return one recipe or raise RecipeNotFoundError."""

    @abstractmethod
    def create_recipe(self, recipe: Recipe) -> Recipe:
        """Store a new recipe and return it with id and timestamps set."""

    @abstractmethod
    def update_recipe(self, recipe_id: int, recipe: Recipe) -> Recipe:
        """Overwrite the non-empty fields of a stored recipe."""

    @abstractmethod
    def delete_recipe(self, recipe_id: int) -> None:
        """Remove a recipe if it exists."""


def _row_to_recipe(row: Row) -> Recipe:
    return Recipe(**row._mapping)


class SqlRecipeRepository(RecipeRepository):
    """Recipe repository backed by an SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create_schema(self) -> None:
        """Create the recipes table if it does not exist yet."""
        metadata.create_all(self._engine)

    def get_all_recipes(self) -> list[Recipe]:
        query = select(recipes_table).order_by(recipes_table.c.created_at.desc())
        with self._engine.connect() as conn:
            return [_row_to_recipe(row) for row in conn.execute(query)]

    def get_recipe_by_id(self, recipe_id: int) -> Recipe:
        query = (
            select(recipes_table)
            .where(recipes_table.c.id == recipe_id)
            .order_by(recipes_table.c.id)
            .limit(1)
        )
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            raise RecipeNotFoundError(recipe_id)
        return _row_to_recipe(row)

    def create_recipe(self, recipe: Recipe) -> Recipe:
        now = datetime.now()
        stored = replace(
            recipe,
            created_at=recipe.created_at or now,
            updated_at=recipe.updated_at or now,
        )
        values = {name: getattr(stored, name) for name in _CONTENT_FIELDS}
        values["created_at"] = stored.created_at
        values["updated_at"] = stored.updated_at
        if stored.id:
            values["id"] = stored.id
        with self._engine.begin() as conn:
            result = conn.execute(insert(recipes_table).values(**values))
            new_id = result.inserted_primary_key[0]
        return replace(stored, id=new_id)

    def update_recipe(self, recipe_id: int, recipe: Recipe) -> Recipe:
        now = datetime.now()
        values = {
            name: value
            for name in _CONTENT_FIELDS
            if (value := getattr(recipe, name))
        }
        values["updated_at"] = now
        statement = (
            update(recipes_table)
            .where(recipes_table.c.id == recipe_id)
            .values(**values)
        )
        with self._engine.begin() as conn:
            conn.execute(statement)
        return replace(recipe, updated_at=now)

    def delete_recipe(self, recipe_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(recipes_table).where(recipes_table.c.id == recipe_id))