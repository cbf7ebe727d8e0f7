#!/usr/bin/env python3

# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Setup configuration for scrape_control package.

This library provides the scrape control table used by the scraping job:
- DynamoDB control table lifecycle (create, reset, read, delete)
- Control record data model (targets, states, chaining)
- Config extraction from a static seed list or a live navigation page
"""

from setuptools import find_packages, setup

setup(
    name="scrape_control",
    version="0.1.0",
    description="Control table and config extraction for web scraping jobs",
    package_dir={"": "lib"},
    packages=find_packages(where="lib"),
    python_requires=">=3.11",
    install_requires=[
        "boto3>=1.34.0",
        # Scraping dependencies
        "httpx>=0.27.0",
        "beautifulsoup4>=4.12.0",
        "soupsieve>=2.5",
        "lxml>=5.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    author="Development Team",
    license="MIT-0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
