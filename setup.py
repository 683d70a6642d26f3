#!/usr/bin/env python3
"""
SememeSimilarity: Word Similarity from a Sememe Dictionary
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="sememe-similarity",
    version="0.1.0",
    description="Word similarity from a sememe hierarchy and sense decompositions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "sememe_similarity": ["data/*.dat"],
    },
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
        "dev": [
            "pytest>=6.0",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "sememe-sim=sememe_similarity.cli:main",
        ],
    },
    keywords=[
        "nlp",
        "hownet",
        "sememe",
        "word-similarity",
        "semantic-similarity",
        "lexical-semantics",
    ],
)
