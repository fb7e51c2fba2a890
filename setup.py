#!/usr/bin/env python
import importlib.util
from pathlib import Path

from setuptools import setup, find_packages

spec = importlib.util.spec_from_file_location(
    "fman.version",
    "src/fman/version.py",
)
module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(module)
VERSION = module.__version__


setup(
    name="fman",
    version=VERSION,
    description="A simple file management CLI tool",
    long_description=Path("README.rst").read_text(encoding="utf-8"),
    long_description_content_type="text/x-rst",
    license="Apache-2.0",
    entry_points={"console_scripts": ["fman=fman.cli:main"]},
    install_requires=[
        "click>=8.0",
        "pydantic>=2",
    ],
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.10",
    extras_require={
        "docs": ["sphinx"],
        "tests": ["pytest"],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Topic :: System :: Filesystems",
    ],
)
