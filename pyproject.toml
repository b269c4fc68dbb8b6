[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerkit"
version = "0.1.0"
description = "A turn-based battle game with binary spell data stores, plus small utilities for bit flags, permissions, bounded stacks, fixed-size player records and a minimal IRC client"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game",
    "turn-based",
    "battle",
    "spells",
    "bitmask",
    "permissions",
    "stack",
    "irc",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerkit-battle = "tinkerkit.game.battle:main"
tinkerkit-spells = "tinkerkit.game.spellfile:main"
tinkerkit-permissions = "tinkerkit.permissions:main"
tinkerkit-binary = "tinkerkit.bits:binary_main"
tinkerkit-flags = "tinkerkit.bits:flags_main"
tinkerkit-player-write = "tinkerkit.playerfile:write_main"
tinkerkit-player-read = "tinkerkit.playerfile:read_main"
tinkerkit-stack = "tinkerkit.stack:main"
tinkerkit-people = "tinkerkit.people:main"
tinkerkit-irc = "tinkerkit.irc.client:main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerkit"]

[tool.hatch.build.targets.sdist]
include = ["tinkerkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_redundant_casts = true
