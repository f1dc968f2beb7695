[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aurionkit"
version = "0.1.0"
description = "Pure-Python models of a hobby OS desktop: PS/2 mouse decoding, network interfaces, DHCP, firmware blobs and small GUI app state machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["dhcp", "ps2-mouse", "network-interface", "firmware", "emulation", "gui", "state-machine"]
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
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aurionkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
