"""
Common test configuration for all test subdirectories.
Put here only those things that can not be done through command line options and pytest.ini file.
"""

import pytest
import os
import sys

# add tests dir to sys path in order to get access to the 'fixtures' module.
this_source_dir = os.path.dirname(os.path.realpath(__file__))
sys.path.append(this_source_dir)


@pytest.fixture
def cubic_points():
    # x monotone, symmetric arc
    return [(0., 0., 0.), (1., 2., 0.), (3., 2., 0.), (4., 0., 0.)]


@pytest.fixture
def space_points():
    return [(0., 0., 0.), (1., 0., 1.), (1., 1., 2.), (0., 1., 0.5), (2., 3., 1.), (4., 3., 0.)]
