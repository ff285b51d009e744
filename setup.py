#!/usr/bin/env python3
"""
VScript Programming Language
Lexical front end for the VScript scripting language.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("VScript requires Python 3.8 or later")

# Read version from __init__.py without importing the package
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "vscript", "__init__.py")
version = "0.1a"
if os.path.exists(version_file):
    with open(version_file, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match:
        version = match.group(1)

# Read README
readme_file = os.path.join(here, "README.md")
long_description = ""
if os.path.exists(readme_file):
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="vscript",
    version=version,
    description="Lexical front end for the VScript scripting language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        # The lexer has no external dependencies
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vscript=vscript.cli:main",        # Token listing driver
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
    ],
    keywords=["programming-language", "lexer", "tokenizer", "compiler"],
    zip_safe=False,
)
