[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpgkit"
version = "0.1.0"
description = "Battle menus, battle HUD elements and shared constants for a turn-based role-playing game."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "game", "menu", "battle", "turn-based", "hud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rpgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
