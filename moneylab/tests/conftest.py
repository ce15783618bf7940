from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from moneylab.app import create_app
from moneylab.app.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(log_level="WARNING"))
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
