import pytest

from expression_trees import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration"""
    reset_config()
    yield
    reset_config()
