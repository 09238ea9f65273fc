[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fleetcore"
version = "0.1.0"
description = "Elasticsearch response models, fleet endpoint request builders and policy coordinators for fleet management servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["elasticsearch", "fleet", "search", "checkpoints", "policy", "coordinator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["fleetcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
