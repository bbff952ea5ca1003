[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchplay"
version = "0.1.0"
description = "Maze search (BFS, DFS, flood fill) and noughts-and-crosses agents (greedy, minimax with alpha-beta, symmetry-pruned look-ahead) with step-by-step traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "bfs", "dfs", "tic-tac-toe", "minimax", "alpha-beta", "greedy", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchplay-maze = "searchplay.maze:main"
searchplay-flood = "searchplay.flood:main"
searchplay-symmetry = "searchplay.symmetry:main"
searchplay-alphabeta = "searchplay.alphabeta:main"
searchplay-greedy = "searchplay.greedy:main"

[tool.hatch.build.targets.wheel]
packages = ["searchplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
