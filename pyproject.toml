[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urms"
version = "0.1.0"
description = "A small semantic-graph cognition runtime with evolution, reflection and memory stages"
requires-python = ">=3.10"
dependencies = []
keywords = ["semantic graph", "cognition", "reflection", "evolution", "runtime"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
urms = "urms.runtime:main"

[tool.hatch.build.targets.wheel]
packages = ["urms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
