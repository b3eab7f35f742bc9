"""Shared fixtures and markers for ASC100 tests."""

import pytest

from asc100.engine.strategy import Strategy


def pytest_configure(config):
    config.addinivalue_line("markers", "stress: long or repetitive inputs")


@pytest.fixture
def core_strict():
    return Strategy.core_strict()


@pytest.fixture
def ext_strict():
    return Strategy.extensions_strict()
