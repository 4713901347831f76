import pytest

from product_service.app import app


@pytest.fixture
def client():
    """Flask test client for the product service."""
    app.config.update(TESTING=True)
    with app.test_client() as client:
        yield client
