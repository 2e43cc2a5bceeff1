[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novelpoly"
version = "0.1.0"
description = "Reed-Solomon erasure coding over GF(2^16) using the novel polynomial basis and an additive FFT"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "reed-solomon",
    "erasure-coding",
    "galois-field",
    "additive-fft",
    "novel-polynomial-basis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
novelpoly-bench = "novelpoly.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["novelpoly"]

[tool.hatch.build.targets.sdist]
include = ["novelpoly", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
