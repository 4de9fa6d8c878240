"""
End-to-end tests against a deployed demo backend.

Set API_BASE_URL to the ALB DNS name (or API endpoint) of a deployed example
and API_VARIANT to "alb" or "s3-logging". Without API_BASE_URL the module is
skipped.
"""

import os

import httpx
import pytest

API_BASE_URL = os.environ.get("API_BASE_URL")
API_VARIANT = os.environ.get("API_VARIANT", "alb")

pytestmark = pytest.mark.skipif(not API_BASE_URL, reason="API_BASE_URL not set")


@pytest.fixture
def integration_client():
    """HTTP client for the deployed endpoint."""
    with httpx.Client(base_url=API_BASE_URL, timeout=30.0) as client:
        yield client


def test_health(integration_client: httpx.Client):
    response = integration_client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["status"] == "healthy"


def test_cors_origin(integration_client: httpx.Client):
    response = integration_client.get("/health")

    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.skipif(API_VARIANT != "alb", reason="ALB fallback only")
def test_alb_unknown_path(integration_client: httpx.Client):
    response = integration_client.get("/unknown-xyz")

    assert response.status_code == 404
    assert "/unknown-xyz" in response.json()["message"]


@pytest.mark.skipif(API_VARIANT != "s3-logging", reason="S3 logging fallback only")
def test_s3_logging_unknown_path(integration_client: httpx.Client):
    response = integration_client.get("/unknown-xyz")

    assert response.status_code == 200
    assert response.json()["message"] == "Welcome to WAF S3 Logging Demo"


@pytest.mark.skipif(API_VARIANT != "s3-logging", reason="S3 logging only")
def test_bot_detection_user_agent(integration_client: httpx.Client):
    response = integration_client.get("/test-bot", headers={"User-Agent": "TestAgent"})

    assert response.json()["userAgent"] == "TestAgent"
