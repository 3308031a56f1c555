[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunkit"
version = "0.1.0"
description = "In-place views over IPv4, IPv6, ICMP, TCP and UDP packets, with Internet checksums and interface, address and route types"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcpip", "packet", "checksum", "ipv4", "ipv6", "icmp", "tcp", "udp", "tun", "sockaddr"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["tunkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
