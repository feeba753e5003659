[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pricekit"
version = "0.1.5"
description = "Pricing toolkit: buy and sell prices, markups, commissions, adjustments and multi-currency conversion with exact decimals."
requires-python = ">=3.10"
dependencies = []
keywords = ["pricing", "markup", "currency", "commission", "tax", "discount"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pricekit-demo = "pricekit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["pricekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
