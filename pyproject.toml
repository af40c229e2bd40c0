[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lecturetrees"
version = "0.1.0"
description = "Small teaching data structures: a min-heap, a linked list, binary trees with traversals, a BST dictionary and the Tower of Hanoi."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary tree",
    "tree traversal",
    "binary search tree",
    "heap",
    "linked list",
    "tower of hanoi",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lecturetrees-demo = "lecturetrees.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lecturetrees"]

[tool.pytest.ini_options]
addopts = "-ra"
