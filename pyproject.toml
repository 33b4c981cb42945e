[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surfpool"
version = "0.5.0"
description = "Configuration, keys, cloud request payloads and dashboard state for a local Solana simulation network"
requires-python = ">=3.11"
keywords = ["solana", "simnet", "svm", "base58", "local-network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]
dependencies = [
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["surfpool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
