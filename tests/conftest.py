"""
Pytest configuration and fixtures for the InvestDom backend tests.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["RESEND_API_KEY"] = "re_test_key"
os.environ.pop("CONTACT_EMAIL", None)

from investdom.core.config import Settings, get_settings
from investdom.main import app
from investdom.models.email import ProviderError, SendEmailResult, SentEmail


@pytest.fixture
def settings():
    """Settings with a Resend key configured."""
    return Settings(resend_api_key="re_test_key", _env_file=None)


@pytest.fixture
def client(settings):
    """Test client whose settings can be adjusted per test."""
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_resend(monkeypatch):
    """Replace the Resend client used by the contact endpoint."""
    instance = MagicMock()
    instance.send = AsyncMock(return_value=SendEmailResult(data=SentEmail(id="abc")))
    factory = MagicMock(return_value=instance)
    monkeypatch.setattr("investdom.api.endpoints.contact.ResendClient", factory)
    instance.factory = factory
    return instance


@pytest.fixture
def provider_error():
    return SendEmailResult(error=ProviderError(
        name="validation_error",
        message="The `to` field must be a valid email address.",
        status_code=422,
    ))


@pytest.fixture
def valid_submission():
    return {
        "name": "Anna",
        "email": "a@b.com",
        "phone": "",
        "temat_wybrany": "kupno",
        "message": "Hi",
    }
