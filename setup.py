#!/usr/bin/env python3
"""
Setup configuration for ISBN Parser
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="isbn-parser",
    version="1.0.0",
    author="ISBN Parser Team",
    author_email="",
    description="Parse, validate and reformat ISBN-10, ISBN-13, EAN-13 and GTIN-14 codes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples", "scripts"]),
    package_data={
        "isbn_parser": [
            "data/*.json",
        ],
    },
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "isbn-parse=isbn_parser.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="isbn ean13 gtin14 books barcode parser hyphenation",
)
