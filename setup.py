#!/usr/bin/env python3

"""Setup script for the molecular structure enumeration and signature package."""

from setuptools import setup, find_packages

setup(
    name="molsig",
    version="0.1.0",
    description="Isomorph-free molecular structure enumeration and canonical signatures",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "rdkit>=2022.3.1",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "molsig-enumerate=molsig.presentation.cli.enumerate_structures:main",
            "molsig-sign=molsig.presentation.cli.sign_structures:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
