[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "karpuz"
version = "0.1.0"
description = "A timed watermelon-slicing arcade game with bombs, pausing and a high-score file"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "watermelon", "slicing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
karpuz = "karpuz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["karpuz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
