"""
Handler for the S3 WAF logging demo API (HTTP API, payload format 2.0).

Test paths are meant to trigger SQL injection, bot control and rate based
WAF rules. Unknown paths get the welcome payload rather than a 404.
"""

from typing import Any, Dict

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.cors import CorsPolicy
from service.handlers.utils.responses import create_api_response, create_error_response
from service.logic.waf_test_routes import waf_test_routes
from service.models.request import HttpRequest

logger = Logger(service="s3-logging-demo")
tracer = Tracer(service="s3-logging-demo")
metrics = Metrics(namespace="WafLoggingExamples/S3", service="s3-logging-demo")

CORS_POLICY = CorsPolicy.s3_logging_policy()


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP, log_event=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    HTTP API handler for the S3 logging demo.

    Args:
        event: HTTP API event
        context: Lambda context object

    Returns:
        HTTP API response with a JSON body
    """
    allow_origin = None
    try:
        allow_origin = get_handler_env_vars().CORS_ALLOW_ORIGIN
        request = HttpRequest.from_http_api_event(event)

        tracer.put_annotation("path", request.path)
        tracer.put_annotation("http_method", request.method)
        logger.info(
            f"Request: {request.method} {request.path}",
            extra={
                "query_string": request.query_string_parameters,
                "headers": request.headers,
            },
        )
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

        result = waf_test_routes.dispatch(request)
        metrics.add_metric(
            name="RouteMatched" if result.matched else "RouteNotMatched",
            unit=MetricUnit.Count,
            value=1,
        )

        response = create_api_response(
            status_code=result.status_code,
            body=result.body,
            cors=CORS_POLICY,
            allow_origin=allow_origin,
        )
        logger.info("Response built", extra={"response": response})
        return response

    except Exception as e:
        logger.exception(
            "Lambda invocation failed",
            extra={"error": str(e), "request_id": context.aws_request_id},
        )
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        return create_error_response(context.aws_request_id, CORS_POLICY, allow_origin)
