[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bamboo"
version = "0.5.4"
description = "Vietnamese input method engine: Telex, VNI and VIQR typing rules, spelling checks and legacy charset encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["vietnamese", "input method", "telex", "vni", "viqr", "ime", "charset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Vietnamese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bamboo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
