[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagesim"
version = "0.1.0"
description = "Page replacement simulators (FIFO, LRU, optimal) that count page faults over a memory reference trace"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "page replacement", "fifo", "lru", "optimal", "operating systems", "simulation"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagesim-fifo = "pagesim.fifo:main"
pagesim-lru = "pagesim.lru:main"
pagesim-optimal = "pagesim.optimal:main"

[tool.hatch.build.targets.wheel]
packages = ["pagesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
