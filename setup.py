# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Setup script for fantomo.

Installation command::

    pip install [--user] [-e] .
"""

import os

from setuptools import setup, find_packages


root_path = os.path.dirname(__file__)


def read_requirements(fname):
    with open(os.path.join(root_path, fname)) as f:
        return [line.strip() for line in f if line.strip()]


requires = read_requirements('requirements.txt')
test_requires = read_requirements('test_requirements.txt')

long_description = """
fantomo is a Python library for creating two-dimensional fan beam tomography test problems.

For a square domain of N x N unit cells and a point source rotating around it, fantomo computes the exact length of every ray in every cell, and returns the result as a sparse system matrix together with a phantom image and the corresponding exact data.

Features
========

- Exact ray-cell intersection lengths for arbitrary source angles, numbers of rays, source distances and fan spans
- Sparse system matrices based on `scipy.sparse`, also available as a linear operator with adjoint
- Shepp-Logan, Defrise and cuboid phantoms in the cell ordering of the system matrix
- Optional step-by-step illustration of the rays and of the matrix rows with matplotlib
"""

setup(
    name='fantomo',

    version='0.1.0',

    description='Fan beam tomography test problems',
    long_description=long_description,

    author='fantomo contributors',

    license='MPL-2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development',

        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',

        'Programming Language :: Python :: 3',

        'Operating System :: OS Independent'
    ],

    keywords='research mathematics imaging tomography fan beam test problem',

    packages=find_packages(exclude=['*test*']),
    package_dir={'fantomo': 'fantomo'},

    python_requires='>=3.6',
    install_requires=requires,
    extras_require={
        'testing': test_requires,
        'show': 'matplotlib',
    },
)
