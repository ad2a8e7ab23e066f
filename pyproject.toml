[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomicecc"
version = "1.1.1"
description = "Side-channel atomic elliptic-curve arithmetic on P-256 with word-level big integers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "elliptic curve",
    "ecc",
    "p-256",
    "secp256r1",
    "jacobian coordinates",
    "side-channel atomicity",
    "scalar multiplication",
    "montgomery",
    "big integer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
atomicecc = "atomicecc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["atomicecc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["atomicecc"]
