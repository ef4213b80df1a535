from datetime import datetime

import pytest
from sqlalchemy import create_engine

from recipes_api.models import Recipe, RecipeNotFoundError
from recipes_api.repository import RecipeRepository, SqlRecipeRepository


@pytest.fixture
def repo(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'recipes.db'}")
    repository = SqlRecipeRepository(engine)
    repository.create_schema()
    yield repository
    engine.dispose()


def _sample(title="Chicken Curry", cost=450, created_at=None):
    return Recipe(
        title=title,
        making_time="45 min",
        serves="4 people",
        ingredients="onion, chicken, seasoning",
        cost=cost,
        created_at=created_at,
    )


def test_repository_interface_is_abstract():
    with pytest.raises(TypeError):
        RecipeRepository()


def test_empty_repository_lists_nothing(repo):
    assert repo.get_all_recipes() == []


def test_create_assigns_id_and_timestamps(repo):
    created = repo.create_recipe(_sample())
    assert created.id is not None and created.id > 0
    assert isinstance(created.created_at, datetime)
    assert created.created_at == created.updated_at
    assert created.title == "Chicken Curry"


def test_create_then_get_round_trip(repo):
    created = repo.create_recipe(_sample())
    assert repo.get_recipe_by_id(created.id) == created


def test_create_keeps_given_created_at(repo):
    moment = datetime(2020, 1, 2, 3, 4, 5)
    created = repo.create_recipe(_sample(created_at=moment))
    assert created.created_at == moment
    assert repo.get_recipe_by_id(created.id).created_at == moment


def test_ids_are_distinct(repo):
    first = repo.create_recipe(_sample("A"))
    second = repo.create_recipe(_sample("B"))
    assert first.id != second.id
    assert repo.get_recipe_by_id(second.id).title == "B"


def test_get_missing_raises_not_found(repo):
    with pytest.raises(RecipeNotFoundError) as info:
        repo.get_recipe_by_id(99)
    assert info.value.recipe_id == 99


def test_get_all_orders_newest_first(repo):
    repo.create_recipe(_sample("old", created_at=datetime(2024, 1, 1)))
    repo.create_recipe(_sample("newest", created_at=datetime(2024, 1, 3)))
    repo.create_recipe(_sample("middle", created_at=datetime(2024, 1, 2)))
    titles = [recipe.title for recipe in repo.get_all_recipes()]
    assert titles == ["newest", "middle", "old"]


def test_update_changes_only_non_empty_fields(repo):
    created = repo.create_recipe(_sample())
    repo.update_recipe(created.id, Recipe(title="Tomato Soup"))
    stored = repo.get_recipe_by_id(created.id)
    assert stored.title == "Tomato Soup"
    assert stored.making_time == created.making_time
    assert stored.serves == created.serves
    assert stored.ingredients == created.ingredients
    assert stored.cost == created.cost
    assert stored.created_at == created.created_at


def test_update_sets_cost_and_updated_at(repo):
    created = repo.create_recipe(_sample(created_at=datetime(2020, 1, 1)))
    result = repo.update_recipe(created.id, Recipe(cost=900))
    stored = repo.get_recipe_by_id(created.id)
    assert stored.cost == 900
    assert stored.updated_at == result.updated_at
    assert stored.updated_at >= created.updated_at


def test_update_returns_given_fields(repo):
    created = repo.create_recipe(_sample())
    change = Recipe(title="Ramen", serves="2 people")
    result = repo.update_recipe(created.id, change)
    assert result.title == "Ramen"
    assert result.serves == "2 people"


def test_update_of_missing_id_changes_nothing(repo):
    created = repo.create_recipe(_sample())
    repo.update_recipe(created.id + 100, Recipe(title="Other"))
    assert [r.title for r in repo.get_all_recipes()] == ["Chicken Curry"]


def test_delete_removes_recipe(repo):
    keep = repo.create_recipe(_sample("keep"))
    gone = repo.create_recipe(_sample("gone"))
    repo.delete_recipe(gone.id)
    with pytest.raises(RecipeNotFoundError):
        repo.get_recipe_by_id(gone.id)
    assert repo.get_all_recipes() == [keep]


def test_delete_missing_leaves_others(repo):
    created = repo.create_recipe(_sample())
    repo.delete_recipe(created.id + 50)
    assert repo.get_all_recipes() == [created]