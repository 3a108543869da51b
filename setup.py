#!/usr/bin/env python3

"""Setup script for the freehand stroke scoring package."""

from setuptools import setup, find_packages

setup(
    name="strokescore",
    version="0.1.0",
    description="Score freehand strokes against reference curves with discrete Fréchet distance",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "score-strokes=strokescore.presentation.cli.score_strokes:main",
            "stroke-demo=strokescore.presentation.cli.stroke_demo:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
