[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoprims"
version = "0.1.0"
description = "Pedersen, Bowe-Hopwood and SHA-256 hashes and commitments over twisted Edwards curves, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "pedersen",
    "bowe-hopwood",
    "commitment",
    "hash",
    "twisted-edwards",
    "jubjub",
    "sha256",
    "blake2s",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptoprims"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
