[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chessnet"
version = "0.1.0"
description = "Two-player networked chess board with a small relay server"
requires-python = ">=3.10"
keywords = ["chess", "game", "network", "pygame", "multiplayer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chessnet = "chessnet.app:main"
chessnet-server = "chessnet.server:main"

[tool.hatch.build.targets.wheel]
packages = ["chessnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
