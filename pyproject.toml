[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gf2codes"
version = "1.0.0"
description = "Binary linear codes over GF(2): Hadamard and Golay constructions, encoding and syndrome decoding"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["coding theory", "linear codes", "GF(2)", "golay", "hadamard", "syndrome decoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gf2-encode = "gf2codes.cli:encode_main"
gf2-decode = "gf2codes.cli:decode_main"
gf2-noisy = "gf2codes.cli:noisy_main"
gf2-demo = "gf2codes.cli:demo_main"

[tool.hatch.build.targets.wheel]
packages = ["gf2codes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
