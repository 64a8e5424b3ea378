#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="triplecol",
    version="0.1.0",
    description="Left-master three column tiling layouts with weighted resizing",
    license="MIT",
    packages=find_packages(include=["triplecol", "triplecol.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pypubsub",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["triplecol=triplecol.__main__:main"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
