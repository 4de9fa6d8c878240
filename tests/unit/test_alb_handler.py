"""Unit tests for the ALB demo handler."""

import json
import os
from unittest.mock import patch

from alb_regional_minimal.lambda_function import lambda_handler as entry_point
from service.handlers.alb_handler import lambda_handler
from service.handlers.models.env_vars import HandlerEnvVars


def _strip_timestamp(response):
    body = json.loads(response["body"])
    body.pop("timestamp")
    return {**response, "body": body}


class TestLambdaHandler:
    """Test cases for lambda_handler."""

    def test_health(self, alb_event, lambda_context):
        response = lambda_handler(alb_event, lambda_context)

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"

        body = json.loads(response["body"])
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert "timestamp" in body

    def test_hello(self, alb_event, lambda_context):
        alb_event.update({"path": "/api/hello", "httpMethod": "POST"})

        response = lambda_handler(alb_event, lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["message"] == "Hello from Lambda!"
        assert body["method"] == "POST"
        assert body["path"] == "/api/hello"

    def test_info(self, alb_event, lambda_context):
        alb_event["path"] = "/api/info"

        response = lambda_handler(alb_event, lambda_context)

        body = json.loads(response["body"])
        assert body["service"] == "Lambda ALB Example"
        assert body["version"] == "1.0.0"
        assert body["region"] == "us-east-1"

    def test_unknown_path_returns_404(self, alb_event, lambda_context):
        alb_event["path"] = "/unknown-xyz"

        response = lambda_handler(alb_event, lambda_context)

        assert response["statusCode"] == 404
        assert response["headers"]["Content-Type"] == "application/json"

        body = json.loads(response["body"])
        assert body["error"] == "Not Found"
        assert "/unknown-xyz" in body["message"]

    def test_missing_path_is_root(self, lambda_context):
        """Test that an event without a path gets the welcome payload."""
        response = lambda_handler({"httpMethod": "GET", "headers": {}}, lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["message"] == "Welcome to Lambda ALB Example"
        assert body["endpoints"] == [
            "/health - Health check endpoint",
            "/api/hello - Hello endpoint",
            "/api/info - Service information",
        ]

    def test_empty_event(self, lambda_context):
        response = lambda_handler({}, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["message"] == "Welcome to Lambda ALB Example"

    def test_cors_headers(self, alb_event, lambda_context):
        response = lambda_handler(alb_event, lambda_context)

        headers = response["headers"]
        assert headers["Access-Control-Allow-Origin"] == "*"
        assert headers["Access-Control-Allow-Headers"] == "Content-Type"
        assert headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"

    def test_response_shape(self, alb_event, lambda_context):
        response = lambda_handler(alb_event, lambda_context)

        assert set(response) == {"statusCode", "headers", "body"}
        assert isinstance(response["body"], str)

    def test_identical_input_identical_output(self, alb_event, lambda_context):
        alb_event["path"] = "/api/hello"

        first = lambda_handler(dict(alb_event), lambda_context)
        second = lambda_handler(dict(alb_event), lambda_context)

        assert _strip_timestamp(first) == _strip_timestamp(second)

    def test_lambda_handler_with_exception(self, alb_event, lambda_context):
        """Test lambda handler when route dispatch fails."""
        with patch("service.handlers.alb_handler.alb_routes") as mock_routes:
            mock_routes.dispatch.side_effect = Exception("Test error")
            response = lambda_handler(alb_event, lambda_context)

        assert response["statusCode"] == 500
        assert response["headers"]["Content-Type"] == "application/json"
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

        body = json.loads(response["body"])
        assert body["message"] == "Internal server error"
        assert body["request_id"] == "test-request-id-123"
        assert "timestamp" in body


class TestEntryPoint:
    """Test cases for the function entry module."""

    def test_delegates_to_handler(self, alb_event, lambda_context):
        response = entry_point(alb_event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["status"] == "healthy"


class TestLooseInput:
    """Test cases for events and settings the handler must tolerate."""

    def test_non_string_header_and_query_values(self, alb_event, lambda_context):
        alb_event.update({
            "path": "/api/hello",
            "headers": {"x-empty": None, "x-count": 3},
            "queryStringParameters": {"page": 2},
        })

        response = lambda_handler(alb_event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["path"] == "/api/hello"

    def test_non_string_path(self, lambda_context):
        response = lambda_handler({"path": 404}, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["message"] == "Path 404 not found"

    def test_empty_environment_reports_dev(self, alb_event, lambda_context):
        env_vars = HandlerEnvVars.model_validate({**os.environ, "ENVIRONMENT": ""})

        with patch("service.logic.alb_routes.get_handler_env_vars", return_value=env_vars), \
                patch("service.handlers.alb_handler.get_handler_env_vars", return_value=env_vars):
            health = lambda_handler(alb_event, lambda_context)
            alb_event["path"] = "/unknown-xyz"
            missing = lambda_handler(alb_event, lambda_context)

        assert health["statusCode"] == 200
        assert json.loads(health["body"])["environment"] == "dev"
        assert missing["statusCode"] == 404
