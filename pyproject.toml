[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashtab"
version = "1.0.0"
description = "Streaming file hashing with many algorithms, checksum-file export and a throughput benchmark"
requires-python = ">=3.10"
keywords = [
    "hash",
    "checksum",
    "crc32",
    "crc64",
    "xxhash",
    "sha3",
    "blake2sp",
    "blake3",
    "kangarootwelve",
    "parallelhash",
    "quickxorhash",
    "ed2k",
    "sfv",
    "sumfile",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving",
    "Topic :: Utilities",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hashtab-benchmark = "hashtab.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["hashtab"]

[tool.hatch.build.targets.sdist]
include = ["hashtab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
