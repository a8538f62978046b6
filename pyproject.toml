[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablemenu"
version = "0.1.0"
description = "A small restaurant ordering system: a menu of dishes, customer orders and order history, with an interactive console."
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "menu", "ordering", "point-of-sale", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tablemenu = "tablemenu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tablemenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
