[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sealedinfer"
version = "0.1.0"
description = "Pure-Python AES-128 (ECB, CBC, CTR) and multi-label accuracy helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "cbc", "ctr", "ecb", "encryption", "accuracy", "multi-label"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["sealedinfer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
