[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockkit"
version = "0.1.0"
description = "Building blocks for block-cipher and hash code: block buffers, padding schemes, GF(2^n) doubling, hex literals and compact blob storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "padding", "pkcs7", "block buffer", "vlq", "hex", "blob storage"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blobby-convert = "blockkit.convert:main"

[tool.hatch.build.targets.wheel]
packages = ["blockkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
