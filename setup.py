"""Minimal setup.py for streaming_stats package."""

import os
from pathlib import Path

from setuptools import find_packages, setup

# Read the version from _version.py
__version__ = ""
exec(open(os.path.join("streaming_stats", "_version.py")).read())

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="streaming_stats",
    version=__version__,
    description="Streaming sample statistics and confidence intervals for measurement data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["streaming_stats", "streaming_stats.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.26",
        "pandas>=2.1",
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0",
            "pytest-cov>=4.1",
            "pytest-xdist>=3.5",
            "hypothesis>=6.0",
            "scipy>=1.11",
            "pylint>=3.0",
            "black>=24.1",
            "mypy>=1.8",
            "isort>=5.13",
            "types-PyYAML>=6.0.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
