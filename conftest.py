# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from os import path

import numpy as np
import pytest

import fantomo
from fantomo.util.graphics import MATPLOTLIB_AVAILABLE

if MATPLOTLIB_AVAILABLE:
    # Tests and doctests must never open windows
    import matplotlib
    matplotlib.use('Agg')


# --- Add numpy and fantomo to all doctests ---


@pytest.fixture(autouse=True)
def _add_doctest_np_fantomo(doctest_namespace):
    doctest_namespace['np'] = np
    doctest_namespace['fantomo'] = fantomo


# --- Ignored tests ---


this_dir = path.dirname(__file__)
collect_ignore = [path.join(this_dir, 'setup.py')]


# --- Command-line options --- #


def pytest_addoption(parser):
    suite_help = (
        'enable an opt-in test suite NAME. '
        'Available suites: largescale'
    )
    parser.addoption(
        '-S', '--suite', nargs='*', metavar='NAME', type=str, default=[],
        help=suite_help
    )


def pytest_configure(config):
    # Register an additional marker
    config.addinivalue_line(
        'markers', 'suite(name): mark test to belong to an opt-in suite'
    )


def pytest_runtest_setup(item):
    suites = [mark.args[0] for mark in item.iter_markers(name='suite')]
    if suites:
        if not any(val in suites for val in item.config.getoption('-S')):
            pytest.skip('test not in suites {!r}'.format(suites))
