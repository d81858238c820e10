[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qmlkit"
version = "0.1.0"
description = "Building blocks for QML editor tooling: formatting, qmldir and .qmlls.ini parsing, module discovery, import resolution, completion heuristics and an external grammar scanner"
requires-python = ">=3.10"
dependencies = []
keywords = ["qml", "qt", "language-server", "formatter", "editor", "tooling"]
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
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qmlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
