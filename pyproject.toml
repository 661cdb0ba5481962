[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jwkit"
version = "0.1.0"
description = "JSON Web Key data types, base64 helpers and conversions to cryptography key objects"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["jose", "jwk", "jwa", "base64url", "json-web-key", "rsa", "ecdsa"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["jwkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
