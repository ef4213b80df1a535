"""Web application wiring, database setup and the server entry point."""

from __future__ import annotations

import argparse
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from flask import Flask, request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from .handler import RecipeHandler
from .repository import SqlRecipeRepository
from .usecase import RecipeUsecase

logger = logging.getLogger(__name__)

DEFAULT_PORT = "8080"


def database_url(env: Mapping[str, str] | None = None) -> str:
    """Build the MySQL connection URL from DB_* settings."""
    env = os.environ if env is None else env
    port = env.get("DB_PORT") or None
    url = URL.create(
        "mysql+pymysql",
        username=env.get("DB_USER") or None,
        password=env.get("DB_PASSWORD") or None,
        host=env.get("DB_HOST") or None,
        port=int(port) if port else None,
        database=env.get("DB_NAME") or None,
        query={"charset": "utf8mb4"},
    )
    return url.render_as_string(hide_password=False)


def init_db(url: str) -> Engine:
    """Connect to the database, create the schema and return the engine."""
    try:
        engine = create_engine(url)
        with engine.connect():
            pass
    except SQLAlchemyError as exc:
        raise RuntimeError(f"failed to connect database: {exc}") from exc

    SqlRecipeRepository(engine).create_schema()
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    print("DB migrated")
    return engine


def _json_body() -> Any:
    try:
        return json.loads(request.get_data())
    except ValueError:
        return None


def create_app(handler: RecipeHandler) -> Flask:
    """Create the Flask application exposing the recipe routes."""
    app = Flask(__name__)
    app.json.ensure_ascii = False

    @app.get("/recipes")
    def list_recipes():
        return handler.get_all()

    @app.get("/recipes/<id_param>")
    def show_recipe(id_param: str):
        return handler.get_by_id(id_param)

    @app.post("/recipes")
    def create_recipe():
        return handler.create(_json_body())

    @app.patch("/recipes/<id_param>")
    def update_recipe(id_param: str):
        return handler.update(id_param, _json_body())

    @app.delete("/recipes/<id_param>")
    def delete_recipe(id_param: str):
        return handler.delete(id_param)

    return app


def _load_env() -> bool:
    env_file = Path(".env")
    if not env_file.is_file():
        return False
    load_dotenv(env_file)
    return True


def main(argv: list[str] | None = None) -> None:
    """Start the recipes HTTP server."""
    parser = argparse.ArgumentParser(
        prog="recipes-api",
        description="Serve the recipes HTTP API. Settings come from the "
        "environment or a .env file: DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, "
        "DB_NAME and PORT.",
    )
    parser.parse_args(argv)

    if not _load_env():
        print("Error loading .env file")
        logger.warning(".env file not found")

    try:
        engine = init_db(database_url())
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc

    handler = RecipeHandler(RecipeUsecase(SqlRecipeRepository(engine)))
    app = create_app(handler)
    port = os.environ.get("PORT") or DEFAULT_PORT
    app.run(host="0.0.0.0", port=int(port))