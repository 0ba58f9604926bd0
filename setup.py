#!/usr/bin/python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages
import os

ROOT = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(ROOT, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='easypact',
    include_package_data=True,
    package_data={'easypact.library': ['data/*.csv']},
    version='1.0.0',
    packages=find_packages(),
    description='easypact - Liquid property and pipeline utilities for process calculations',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Mark W. Burgoyne',
    author_email='mark.w.burgoyne@gmail.com',
    keywords=['liquid', 'density', 'viscosity', 'interpolation', 'pipeline'],
    classifiers=[],
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'pandas',
        'tabulate',
        'openpyxl',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['easypact=easypact.cli:main'],
    },
)
