# tests/conftest.py
import pytest

from app import app as flask_app


@pytest.fixture
def client():
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def open_grid():
    return [[0] * 20 for _ in range(20)]
