[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicrypt"
version = "0.1.0"
description = "Classical ciphers, their cryptanalysis, number-theory helpers and a toy LWE lattice scheme"
requires-python = ">=3.10"
keywords = ["cryptography", "caesar", "vigenere", "affine", "cryptanalysis", "lwe", "lattice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cipher = "classicrypt.cipher:main"
fcipher = "classicrypt.fcipher:main"
crypta = "classicrypt.crypta:main"
crypto-tool = "classicrypt.tool:main"

[tool.hatch.build.targets.wheel]
packages = ["classicrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
