# recipes_api

A small JSON HTTP service for keeping a collection of cooking recipes in an
SQL database. Each recipe has a title, a making time, a number of servings,
a list of ingredients and a cost. The service can list, read, create, update
and remove recipes.

## Installation

```
pip install .
```

The command connects to MySQL through a `mysql+pymysql` URL, so the PyMySQL
driver has to be installed alongside the package for that:

```
pip install pymysql
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from the environment. A `.env` file in the working
directory is loaded first, if there is one; without it the command prints
`Error loading .env file` and carries on with the environment as it is.

| Variable      | Meaning                          |
|---------------|----------------------------------|
| `DB_NAME`     | database name                    |
| `DB_USER`     | database user                    |
| `DB_PASSWORD` | database password                |
| `DB_HOST`     | database host                    |
| `DB_PORT`     | database port                    |
| `PORT`        | HTTP port, `8080` when not set   |

An example `.env`:

```
DB_NAME=recipes
DB_USER=user
DB_PASSWORD=password
DB_HOST=localhost
DB_PORT=3306
PORT=8080
```

## Running

```
recipes-api
```

The server listens on all interfaces at `PORT`. At startup it connects to
the database, creates the `recipes` table if it does not exist yet, prints
`DB migrated` and turns on SQL statement logging. If the database cannot be
reached the command exits with `failed to connect database: ...`.
`recipes-api --help` shows a short description of the settings.

## Endpoints

| Method | Path            | Action                         |
|--------|-----------------|--------------------------------|
| GET    | `/recipes`      | list all recipes, newest first |
| GET    | `/recipes/<id>` | show one recipe                |
| POST   | `/recipes`      | create a recipe                |
| PATCH  | `/recipes/<id>` | update a recipe                |
| DELETE | `/recipes/<id>` | remove a recipe                |

Creating a recipe needs all of `title`, `making_time`, `serves`,
`ingredients` (non-empty strings) and `cost` (a non-zero integer):

```
{"title": "Chicken curry", "making_time": "45 min", "serves": "4 people",
 "ingredients": "onion, chicken, seasoning", "cost": 1000}
```

When it succeeds the response holds the stored recipe, with its `id` and
its `created_at` and `updated_at` times as `YYYY-MM-DD HH:MM:SS`:

```
{"message": "Recipe successfully created!", "recipe": [{...}]}
```

When a field is missing or has the wrong type the service answers with
status 400:

```
{"message": "Recipe creation failed!",
 "required": "title, making_time, serves, ingredients, cost"}
```

An update changes only the fields that are given with a non-empty value
(a non-zero `cost`) and answers with those fields, without the `id`. A body
that is not a JSON object of the right types gives
`{"message": "Failed to decode request body"}` with status 400.

Field names in request bodies are matched without regard to case; unknown
fields and `null` values are ignored.

In responses the `cost` is given as a string. When no recipe has the id that
was asked for, the answer is `{"message": "No Recipe found"}` with status 404.
When the id is not a whole number, the answer is `{"message": "Invalid ID"}`
with status 400. Deleting an id that does not exist still answers
`{"message": "Recipe successfully removed!"}`.

## Using it from Python

The layers can be put together by hand, for example over SQLite:

```python
from recipes_api.app import create_app, init_db
from recipes_api.handler import RecipeHandler
from recipes_api.repository import SqlRecipeRepository
from recipes_api.usecase import RecipeUsecase

engine = init_db("sqlite:///recipes.db")
repository = SqlRecipeRepository(engine)
app = create_app(RecipeHandler(RecipeUsecase(repository)))
app.run(port=8080)
```

- `recipes_api.models.Recipe` is the recipe dataclass; `to_dict()` returns it
  as a JSON-ready mapping. `RecipeNotFoundError` is raised for unknown ids.
- `recipes_api.repository.RecipeRepository` is the abstract storage
  interface; `SqlRecipeRepository(engine)` implements it over an SQLAlchemy
  engine, and `create_schema()` creates the table.
- `recipes_api.usecase.RecipeUsecase` passes the operations through to a
  repository.
- `recipes_api.handler.RecipeHandler` turns requests into `(body, status)`
  pairs without depending on a web framework.
- `recipes_api.app.database_url(env)` builds the MySQL connection URL from a
  mapping holding the variables listed above (the process environment when
  none is given).

## Limits

The table is created from the package's own schema; there are no migration
files and no schema changes beyond creating a missing table. Errors are
logged through Python's `logging` only and are not reported to any outside
service.