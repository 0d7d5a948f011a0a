"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from domaintwist.main import app


@pytest.fixture(scope="function")
def client():
    """Create a test client for the FastAPI application"""
    with TestClient(app) as test_client:
        yield test_client
