import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cafego.app.config import Config
from cafego.app.factory import create_app


class CafeTestConfig(Config):
    TESTING = True
    DISPLAY_USERNAME = "Matthew"
    CORS_ORIGINS = []


@pytest.fixture()
def app():
    return create_app(CafeTestConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client
