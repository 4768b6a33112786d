[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greenlight"
version = "1.0.0"
description = "A small JSON API for movie records, served as a WSGI application"
requires-python = ">=3.10"
dependencies = [
    "werkzeug",
]
keywords = ["wsgi", "json", "api", "movies", "werkzeug", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
greenlight = "greenlight.main:main"

[tool.hatch.build.targets.wheel]
packages = ["greenlight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
