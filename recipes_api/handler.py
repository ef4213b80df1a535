"""Recipe request handlers, independent of the web framework serving them."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from http import HTTPStatus
from typing import Any

from .models import Recipe
from .usecase import RecipeUsecase

logger = logging.getLogger(__name__)

Response = tuple[dict[str, Any], int]

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_STRING_FIELDS = ("title", "making_time", "serves", "ingredients")
_REQUIRED_FIELDS = "title, making_time, serves, ingredients, cost"
_TIMESTAMP_ZERO = datetime(1, 1, 1)


class _BindError(ValueError):
    """The request body does not fit the expected recipe shape."""


def _parse_id(id_param: str) -> int | None:
    """Parse a path id as a signed 64-bit decimal integer, or return None."""
    if not _ID_PATTERN.fullmatch(id_param):
        return None
    value = int(id_param)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _bind(payload: Any) -> dict[str, Any]:
    """Extract recipe fields from a decoded JSON body.

    Keys match field names case-insensitively, unknown keys are ignored and
    null values leave a field at its default.
    """
    if not isinstance(payload, dict):
        raise _BindError("request body must be a JSON object")
    fields: dict[str, Any] = {name: "" for name in _STRING_FIELDS}
    fields["cost"] = 0
    for key, value in payload.items():
        name = str(key).casefold()
        if name not in fields or value is None:
            continue
        if name == "cost":
            if isinstance(value, bool) or not isinstance(value, int):
                raise _BindError("cost must be an integer")
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise _BindError("cost is out of range")
        elif not isinstance(value, str):
            raise _BindError(f"{name} must be a string")
        fields[name] = value
    return fields


def _format_time(moment: datetime | None) -> str:
    moment = moment or _TIMESTAMP_ZERO
    return moment.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")


def _summary(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": recipe.id,
        "title": recipe.title,
        "making_time": recipe.making_time,
        "serves": recipe.serves,
        "ingredients": recipe.ingredients,
        "cost": str(recipe.cost),
    }


def _invalid_id() -> Response:
    return {"message": "Invalid ID"}, HTTPStatus.BAD_REQUEST


def _not_found() -> Response:
    return {"message": "No Recipe found"}, HTTPStatus.NOT_FOUND


def _creation_failed(status: int) -> Response:
    return {"message": "Recipe creation failed!", "required": _REQUIRED_FIELDS}, status


class RecipeHandler:
    """Turns recipe requests into (body, status) responses."""

    def __init__(self, usecase: RecipeUsecase) -> None:
        self._usecase = usecase

    def get_all(self) -> Response:
        """List every recipe."""
        try:
            recipes = self._usecase.get_all_recipes()
        except Exception as exc:
            return {"error": str(exc)}, HTTPStatus.INTERNAL_SERVER_ERROR
        return {"recipes": [_summary(recipe) for recipe in recipes]}, HTTPStatus.OK

    def get_by_id(self, id_param: str) -> Response:
        """Show one recipe."""
        recipe_id = _parse_id(id_param)
        if recipe_id is None:
            return _invalid_id()
        try:
            recipe = self._usecase.get_recipe_by_id(recipe_id)
        except Exception:
            return _not_found()
        return {
            "message": "Recipe details by id",
            "recipe": [_summary(recipe)],
        }, HTTPStatus.OK

    def create(self, payload: Any) -> Response:
        """Create a recipe from a decoded JSON body (None if undecodable)."""
        try:
            fields = _bind(payload)
            missing = [name for name in _STRING_FIELDS if not fields[name]]
            if not fields["cost"]:
                missing.append("cost")
            if missing:
                raise _BindError(f"missing required fields: {', '.join(missing)}")
        except _BindError as exc:
            logger.warning("bind error: %s", exc)
            return _creation_failed(HTTPStatus.BAD_REQUEST)

        try:
            created = self._usecase.create_recipe(Recipe(**fields))
        except Exception:
            return _creation_failed(HTTPStatus.INTERNAL_SERVER_ERROR)

        entry = _summary(created)
        entry["created_at"] = _format_time(created.created_at)
        entry["updated_at"] = _format_time(created.updated_at)
        return {
            "message": "Recipe successfully created!",
            "recipe": [entry],
        }, HTTPStatus.OK

    def update(self, id_param: str, payload: Any) -> Response:
        """Update the non-empty fields of a recipe."""
        recipe_id = _parse_id(id_param)
        if recipe_id is None:
            return _invalid_id()
        try:
            fields = _bind(payload)
        except _BindError:
            return {"message": "Failed to decode request body"}, HTTPStatus.BAD_REQUEST

        try:
            updated = self._usecase.update_recipe(recipe_id, Recipe(**fields))
        except Exception as exc:
            return {"message": str(exc)}, HTTPStatus.INTERNAL_SERVER_ERROR

        entry = _summary(updated)
        del entry["id"]
        return {
            "message": "Recipe successfully updated!",
            "recipe": [entry],
        }, HTTPStatus.OK

    def delete(self, id_param: str) -> Response:
        """Delete a recipe."""
        recipe_id = _parse_id(id_param)
        if recipe_id is None:
            return _invalid_id()
        try:
            self._usecase.delete_recipe(recipe_id)
        except Exception:
            return _not_found()
        return {"message": "Recipe successfully removed!"}, HTTPStatus.OK