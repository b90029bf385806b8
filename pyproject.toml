[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rockmarket"
version = "1.0.0"
description = "Console manager for a small music and clothing shop: employees, stock, orders and reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "inventory", "orders", "employees", "console", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rockmarket = "rockmarket.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rockmarket"]

[tool.pytest.ini_options]
addopts = "-ra"
