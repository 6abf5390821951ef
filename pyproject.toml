[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classiciphers"
version = "0.1.0"
description = "Classical substitution and transposition ciphers: Caesar, affine, Vigenère, Hill, rail fence and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cipher",
    "cryptography",
    "classical",
    "caesar",
    "vigenere",
    "affine",
    "hill",
    "rail-fence",
    "transposition",
    "substitution",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["classiciphers"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
