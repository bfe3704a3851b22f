[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parfold"
version = "0.1.0"
description = "Thread-parallel fold, map and dot product over vectors, with a binary vector file format and a benchmark driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["fold", "map", "reduce", "dot product", "threads", "concurrency", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parfold-fold = "parfold.fold:main"
parfold-map = "parfold.mapping:main"
parfold-create-vector = "parfold.vectorfile:main"
parfold-seq-dotp = "parfold.dotp:seq_main"
parfold-conc-dotp = "parfold.dotp:conc_main"
parfold-bench = "parfold.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["parfold"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
