[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recipes_api"
version = "0.1.0"
description = "A small JSON HTTP API for storing and managing cooking recipes."
requires-python = ">=3.10"
keywords = ["recipes", "rest", "api", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
recipes-api = "recipes_api.app:main"

[tool.hatch.build.targets.wheel]
packages = ["recipes_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
