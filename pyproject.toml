[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linalgkit"
version = "0.1.0"
description = "Dense vectors and matrices in pure Python, with LU, QR, eigen and singular value decompositions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "eigenvalues",
    "svd",
    "lu decomposition",
    "qr decomposition",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linalgkit-demo = "linalgkit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["linalgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
