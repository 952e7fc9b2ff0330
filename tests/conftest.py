from __future__ import annotations

import logging

import pytest

from unity_responsive.config import BuildConfig
from unity_responsive.reporting import SilentReporter, set_reporter, set_verbosity


@pytest.fixture(autouse=True)
def _isolate_reporting():
    set_reporter(SilentReporter())
    set_verbosity(0)
    yield
    logger = logging.getLogger("unity_responsive")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    set_reporter(SilentReporter())


@pytest.fixture
def config() -> BuildConfig:
    return BuildConfig(product_name="Game")
