[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safhe"
version = "0.1.0"
description = "BFV homomorphic encryption over polynomial rings, with NTT, FFT, Karatsuba and Toom-Cook multiplication"
requires-python = ">=3.10"
keywords = ["homomorphic encryption", "bfv", "rlwe", "ntt", "lattice cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "mpmath",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
safhe-param-gen = "safhe.param_gen:main"

[tool.hatch.build.targets.wheel]
packages = ["safhe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
