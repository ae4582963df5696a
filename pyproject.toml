[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wisata-app"
version = "1.0.0"
description = "A small in-memory tourist-destination catalogue with admin and user logins, page navigation and a text-command front end."
requires-python = ">=3.10"
dependencies = []
keywords = ["tourism", "wisata", "catalogue", "crud", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
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
wisata-app = "wisata_app.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wisata_app"]

[tool.hatch.build.targets.sdist]
include = ["wisata_app", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
