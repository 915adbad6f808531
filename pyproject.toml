[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hqc"
version = "0.1.0"
description = "Building blocks of the HQC (Hamming Quasi-Cyclic) post-quantum KEM: GF(2^8) arithmetic, polynomial multiplication modulo X^n - 1, additive FFT, Reed-Muller coding and SHA-3 based hashing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hqc",
    "post-quantum",
    "kem",
    "code-based cryptography",
    "reed-muller",
    "additive fft",
    "galois field",
    "shake256",
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hqc"]

[tool.hatch.build.targets.sdist]
include = ["hqc", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
