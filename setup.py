#!/usr/bin/env python3
"""
Setup script for police-ticker-crawler package.
"""

from setuptools import setup, find_namespace_packages

setup(
    name="police-ticker-crawler",
    version="0.1.0",
    description="Crawl LVZ police ticker detail pages into normalized article records",
    author="Your Name",
    packages=find_namespace_packages(include=["src", "src.*", "data_pipeline", "data_pipeline.*"]),
    install_requires=[
        "python-dateutil>=2.8",
        "beautifulsoup4>=4.12.2",
        "requests>=2.31.0",
        "lxml>=4.9.3",
        "PyYAML>=6.0.2",
        "python-dotenv>=1.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
