"""
Shared pytest fixtures and configuration for Rill tests.
"""

import logging

import pytest

from rill import Observable


@pytest.fixture
def root():
    """Provide a fresh unbound root observable."""
    return Observable()


@pytest.fixture
def asyncio_errors(caplog):
    """Capture error records logged by asyncio (unretrieved failures and the like)."""
    caplog.set_level(logging.ERROR, logger="asyncio")
    return lambda: [r for r in caplog.records if r.name == "asyncio"]
