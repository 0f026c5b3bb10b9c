[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdbqtsplit"
version = "1.0.0"
description = "Split multi-model PDBQT docking output into per-model ligand and flexible side-chain files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdbqt", "docking", "molecular", "split", "chemistry"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pdbqtsplit = "pdbqtsplit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pdbqtsplit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
