[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emarket"
version = "0.1.0"
description = "An item marketplace ledger with genesis import/export, owner-checked updates and paginated queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["marketplace", "ledger", "items", "genesis", "bech32", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
emarketd = "emarket.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["emarket"]

[tool.hatch.build.targets.sdist]
include = ["emarket", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
