import pytest

from easylayout.config import set_default_config


@pytest.fixture(autouse=True)
def reset_default_config():
    """Each test starts without a cached default config."""
    set_default_config(None)
    yield
    set_default_config(None)
