from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from finsim.app import create_app
from finsim.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(cors_origins="http://localhost:5173", log_level="DEBUG"))
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
