[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starpatterns"
version = "0.1.0"
description = "Classic star, number and letter console patterns for practising nested loops"
requires-python = ">=3.10"
keywords = ["patterns", "nested loops", "exercises", "ascii art", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starpatterns = "starpatterns.patterns:main"

[tool.hatch.build.targets.wheel]
packages = ["starpatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
