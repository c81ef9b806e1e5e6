#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "ELF binary hardening checker: RELRO, stack canary, PIE, PIC and FORTIFY_SOURCE"

setup(
    name="hardenscan",
    version="1.0.0",
    description="ELF binary hardening checker: RELRO, stack canary, PIE, PIC and FORTIFY_SOURCE",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Marc Rivero",
    author_email="mriverolopez@gmail.com",
    url="https://github.com/seifreed/hardenscan",
    packages=find_packages(exclude=("tests", "tests.*")),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pyelftools>=0.29",
        "rich>=13.7.0",
        "click>=8.1.7",
        "colorlog>=6.8.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hardenscan=hardenscan.__main__:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
