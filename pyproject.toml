[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suikit"
version = "0.1.0"
description = "Client toolkit for Sui nodes: JSON-RPC client, accounts, addresses and byte encodings"
requires-python = ">=3.10"
keywords = ["sui", "blockchain", "json-rpc", "ed25519", "wallet"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "respx",
]

[tool.hatch.build.targets.wheel]
packages = ["suikit"]

[tool.pytest.ini_options]
addopts = "-ra"
