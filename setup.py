#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup script for the psatm package
"""

from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))

# Read requirements.txt
with open(os.path.join(here, 'requirements.txt'), 'r', encoding='utf-8') as f:
    requirements = [line for line in f.read().splitlines() if line and not line.startswith('#')]

# Read README.md for long description
with open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='psatm',
    version='1.0.0',
    description='Convert protein residues to pseudoatoms at the centroid of their catalytic atoms',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['psatm', 'psatm.*']),
    py_modules=['psatm_cli'],
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'psatm = psatm.cli:main_cli',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
)
