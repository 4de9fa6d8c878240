"""
Pytest configuration and shared fixtures for the WAF logging examples.

This module provides the test environment, sample platform events and the
Lambda context used across unit and end-to-end tests.
"""

import os
from typing import Any, Dict
from unittest.mock import Mock

import pytest

# Handler modules read these at import time, before any fixture runs
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "ENVIRONMENT": "test",
    "APP_VERSION": "1.0.0",
    "POWERTOOLS_SERVICE_NAME": "test-waf-logging-examples",
    "POWERTOOLS_METRICS_NAMESPACE": "TestWafLoggingExamples",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def alb_event() -> Dict[str, Any]:
    """Create a sample ALB target group event."""
    return {
        "requestContext": {
            "elb": {
                "targetGroupArn": "arn:aws:elasticloadbalancing:us-east-1:123456789012:targetgroup/demo/abc123",
            },
        },
        "httpMethod": "GET",
        "path": "/health",
        "queryStringParameters": {},
        "headers": {
            "accept": "application/json",
            "host": "demo-alb-123456.us-east-1.elb.amazonaws.com",
            "user-agent": "curl/8.4.0",
            "x-amzn-trace-id": "Root=1-65a1b2c3-0123456789abcdef01234567",
            "x-forwarded-for": "203.0.113.10",
        },
        "body": "",
        "isBase64Encoded": False,
    }


@pytest.fixture
def proxy_event() -> Dict[str, Any]:
    """Create a sample REST proxy style event."""
    return {
        "resource": "/{proxy+}",
        "path": "/orders",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json", "User-Agent": "test-agent/1.0"},
        "queryStringParameters": {"id": "1' OR '1'='1"},
        "requestContext": {
            "requestId": "proxy-request-id",
            "stage": "test",
            "identity": {"sourceIp": "198.51.100.7"},
        },
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def http_api_event() -> Dict[str, Any]:
    """Create a sample HTTP API (payload format 2.0) event."""
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/test-bot",
        "rawQueryString": "",
        "requestContext": {
            "requestId": "http-api-request-id",
            "stage": "$default",
            "http": {
                "method": "GET",
                "path": "/test-bot",
                "protocol": "HTTP/1.1",
                "sourceIp": "192.0.2.44",
                "userAgent": "TestAgent",
                "queryStringParameters": {},
                "headers": {"user-agent": "TestAgent"},
            },
        },
        "isBase64Encoded": False,
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
