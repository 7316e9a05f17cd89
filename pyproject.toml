[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gotismadex"
version = "0.1.0"
description = "A small HTTP API skeleton with YAML configuration, MySQL connection handling, token authentication and health endpoints."
requires-python = ">=3.10"
keywords = ["api", "http", "flask", "mysql", "health-check", "skeleton"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "pyyaml",
    "pymysql",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gotismadex = "gotismadex.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gotismadex"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
