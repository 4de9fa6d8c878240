"""
Handler for the Kinesis Firehose WAF logging demo API.

The API has no route table: every request is answered with an echo of
itself, so WAF log records delivered through Firehose can be lined up with
what the backend actually received.
"""

from typing import Any, Dict

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.cors import CorsPolicy
from service.handlers.utils.responses import create_api_response, create_error_response
from service.logic.request_echo import build_request_echo
from service.models.request import HttpRequest

logger = Logger(service="firehose-logging-demo")
tracer = Tracer(service="firehose-logging-demo")
metrics = Metrics(namespace="WafLoggingExamples/Firehose", service="firehose-logging-demo")

CORS_POLICY = CorsPolicy.firehose_policy()


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Echo handler for the Firehose logging test API.

    Args:
        event: REST proxy style event, invoked through API Gateway or directly
        context: Lambda context object

    Returns:
        Proxy integration response echoing the request
    """
    allow_origin = None
    try:
        allow_origin = get_handler_env_vars().CORS_ALLOW_ORIGIN
        request = HttpRequest.from_proxy_event(event)

        tracer.put_annotation("path", request.path)
        tracer.put_annotation("http_method", request.method)
        logger.info("Handling request", extra={"path": request.path, "http_method": request.method})
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

        return create_api_response(
            status_code=200,
            body=build_request_echo(request),
            cors=CORS_POLICY,
            allow_origin=allow_origin,
        )

    except Exception as e:
        logger.exception(
            "Lambda invocation failed",
            extra={"error": str(e), "request_id": context.aws_request_id},
        )
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        return create_error_response(context.aws_request_id, CORS_POLICY, allow_origin)
