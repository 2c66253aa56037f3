"""
Pytest configuration and fixtures for tsfreq tests.

Resets the process-wide conversion options around every test.
"""

import pytest

from tsfreq.config.options import reset_options


@pytest.fixture(autouse=True)
def _clean_options():
    reset_options()
    yield
    reset_options()
