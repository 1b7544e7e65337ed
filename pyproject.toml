[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamebox"
version = "0.1.0"
description = "Three small games: terminal chess, a falling-block game and Breakout"
requires-python = ">=3.10"
keywords = ["games", "chess", "tetris", "breakout", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gamebox-chess = "gamebox.chess.board:main"
gamebox-tetris = "gamebox.tetris.game:main"
gamebox-breakout = "gamebox.breakout.game:main"
gamebox-intro = "gamebox.breakout.intro:main"

[tool.hatch.build.targets.wheel]
packages = ["gamebox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
