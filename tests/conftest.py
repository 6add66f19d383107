import logging

import pytest

from cidrcalc.config import CalcConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Give every test a fresh config that ignores the caller's environment."""
    set_config(CalcConfig())
    yield
    set_config(None)
    logging.getLogger("cidrcalc").handlers.clear()
