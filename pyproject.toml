[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekit"
version = "0.1.0"
description = "Elastic containers, heaps, timer queues, hashes, HMACs, PBKDF2, an HMAC-DRBG, AES-CTR and Diffie-Hellman group 14"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "elastic array",
    "queue",
    "heap",
    "timer queue",
    "md5",
    "sha1",
    "sha256",
    "hmac",
    "pbkdf2",
    "crc32c",
    "drbg",
    "aes-ctr",
    "diffie-hellman",
]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["corekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
