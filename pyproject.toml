[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotebook"
version = "0.1.0"
description = "A notebook of classic algorithms: graphs, flows, matching, geometry, number theory, FFT, linear algebra and string search."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "max-flow",
    "matching",
    "geometry",
    "number-theory",
    "fft",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algonotebook"]

[tool.pytest.ini_options]
addopts = "-ra"
