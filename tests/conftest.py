"""
Root pytest configuration file for fogbugz-client tests.
"""

import pytest


def pytest_addoption(parser):
    """Add command-line options for tests."""
    parser.addoption(
        "--use-real-data",
        action="store_true",
        default=False,
        help="Run tests that use a real FogBugz install (requires env vars)",
    )


@pytest.fixture
def use_real_fogbugz_data(request):
    """
    Check if real FogBugz data tests should be run.

    This will be True if the --use-real-data flag is passed to pytest.
    """
    return request.config.getoption("--use-real-data")
