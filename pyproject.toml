[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nettopo"
version = "0.1.0"
description = "Model small network topologies: nodes, interfaces, links and their addressing"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "topology", "graph", "interface", "mac", "loopback"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nettopo = "nettopo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nettopo"]

[tool.pytest.ini_options]
addopts = "-ra"
