[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pyistub"
version = "0.11.2"
description = "Generate Python typing stub files (*.pyi) from collected type metadata"
requires-python = ">=3.11"
dependencies = []
keywords = ["stub", "pyi", "typing", "type-hints", "code-generation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pyistub"]

[tool.hatch.build.targets.sdist]
include = ["pyistub", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
