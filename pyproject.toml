[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpnkit"
version = "0.1.0"
description = "Basic containers (array, linked list, stack, queue, vector) and an infix to reverse Polish notation converter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rpn",
    "reverse-polish-notation",
    "shunting-yard",
    "stack",
    "queue",
    "linked-list",
    "vector",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpnkit = "rpnkit.rpn:main"
rpnkit-practice = "rpnkit.practice:main"

[tool.hatch.build.targets.wheel]
packages = ["rpnkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
