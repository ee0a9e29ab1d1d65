[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphplot"
version = "0.1.0"
description = "Plot a function of x as ASCII art from an infix expression"
requires-python = ">=3.10"
dependencies = []
keywords = ["plot", "ascii", "expression", "postfix", "shunting-yard", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphplot = "graphplot.plot:main"

[tool.hatch.build.targets.wheel]
packages = ["graphplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
