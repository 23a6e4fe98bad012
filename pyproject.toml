[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixfft"
version = "0.1.0"
description = "Building blocks for mixed-radix fast Fourier transforms in pure Python: twiddle tables, number theory helpers and butterfly kernels"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "fourier", "dft", "mixed-radix", "butterfly", "twiddle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["mixfft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
