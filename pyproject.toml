[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "landlord"
version = "0.1.0"
description = "Building blocks for a three-player Fight the Landlord card game server: framed byte buffers, AES and hashing helpers, Redis room bookkeeping, a MySQL wrapper and a minimal static HTTP responder."
requires-python = ">=3.10"
keywords = ["card game", "fight the landlord", "doudizhu", "game server", "rooms", "redis", "aes"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Database",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
    "pymysql",
    "redis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["landlord"]

[tool.hatch.build.targets.sdist]
include = ["landlord", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
