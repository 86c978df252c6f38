[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dollartemplate"
version = "0.1.0"
description = "Dollar-sign string templates with mappings, fallback mappers and safe substitution"
requires-python = ">=3.10"
dependencies = []
keywords = ["template", "substitution", "string", "placeholder", "interpolation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dollartemplate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
