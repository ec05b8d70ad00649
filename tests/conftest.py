"""Shared pytest configuration"""

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PROTOTYPE_* variables and module globals from leaking between tests"""
    import os
    from prototype_objects import config, reset_default_model

    for key in list(os.environ):
        if key.startswith('PROTOTYPE_'):
            monkeypatch.delenv(key)

    config.reload_config()
    reset_default_model()
    yield
    config.reload_config()
    reset_default_model()


@pytest.fixture
def model():
    """Fresh in-memory model"""
    from tests.fixtures import memory_model
    return memory_model()


@pytest.fixture
def person(model):
    from tests.fixtures import build_person
    return build_person(model)
