[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "productcrud"
version = "0.1.0"
description = "A small JSON HTTP service for creating, reading, updating and deleting products stored in MySQL."
requires-python = ">=3.10"
keywords = ["crud", "rest", "json", "mysql", "flask", "products"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask",
    "pymysql",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
productcrud = "productcrud.app:main"

[tool.hatch.build.targets.wheel]
packages = ["productcrud"]

[tool.pytest.ini_options]
addopts = "-ra"
