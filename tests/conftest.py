from __future__ import annotations

import logging

import matplotlib
import pytest

import pyvec2
import pyvec2.logging as vec2_logging


@pytest.fixture(autouse=True, scope="session")
def run_before_tests():
    matplotlib.use(
        "Agg"
    )  # do not show matplotlib plots in tests so they can be run automatically


@pytest.fixture
def shared_zero():
    """
    Yields the module-wide ``zero`` instance and resets it afterwards, so tests
    may mutate it.
    """
    yield pyvec2.zero
    pyvec2.zero.x, pyvec2.zero.y = 0, 0


@pytest.fixture
def restore_logging():
    yield
    vec2_logging.remove_handlers()
    logging.captureWarnings(False)
    vec2_logging.vec2_logger.setLevel(logging.NOTSET)
