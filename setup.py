#!/usr/bin/env python
"""dimselect setup module."""
import pathlib
import re

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

LONG_DESCRIPTION = """
dimselect selects rows or columns of matrices and data frames without ever
collapsing a single row or column to a flat sequence.
"""

VERSION = re.search(
    r'^__version__ = "([^"]+)"',
    HERE.joinpath('dimselect', '__init__.py').read_text(),
    re.MULTILINE,
).group(1)

test_requires = ['pytest>=7', 'hypothesis>=6']

install_requires = [
    line.strip()
    for line in HERE.joinpath('requirements.txt').read_text().splitlines()
    if line.strip()
]

setup(
    name='dimselect',
    packages=find_packages(include=['dimselect', 'dimselect.*']),
    version=VERSION,
    install_requires=install_requires,
    python_requires='>=3.9',
    extras_require={
        'test': test_requires,
    },
    description="Dimension-preserving row and column selection",
    long_description=LONG_DESCRIPTION,
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Operating System :: OS Independent',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
    ],
    license='Apache License, Version 2.0',
)
