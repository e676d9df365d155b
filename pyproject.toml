[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gocare"
version = "0.1.0"
description = "A small HTTP service for managing clinic patient records"
requires-python = ">=3.10"
keywords = ["clinic", "patients", "rest", "http", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
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
    "flask",
    "sqlalchemy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gocare = "gocare.web:main"

[tool.hatch.build.targets.wheel]
packages = ["gocare"]

[tool.hatch.build.targets.sdist]
include = ["gocare", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
