"""
Handler for the function registered as an Application Load Balancer target.

Paths missing from the route table are answered with 404.
"""

from typing import Any, Dict

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.cors import CorsPolicy
from service.handlers.utils.responses import create_api_response, create_error_response
from service.logic.alb_routes import alb_routes
from service.models.request import HttpRequest

logger = Logger(service="alb-demo")
tracer = Tracer(service="alb-demo")
metrics = Metrics(namespace="WafLoggingExamples/Alb", service="alb-demo")

CORS_POLICY = CorsPolicy.alb_policy()


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(
    correlation_id_path=correlation_paths.APPLICATION_LOAD_BALANCER, log_event=True
)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    ALB target handler.

    Args:
        event: ALB target group event
        context: Lambda context object

    Returns:
        ALB response with a JSON body
    """
    allow_origin = None
    try:
        allow_origin = get_handler_env_vars().CORS_ALLOW_ORIGIN
        request = HttpRequest.from_alb_event(event)

        tracer.put_annotation("path", request.path)
        tracer.put_annotation("http_method", request.method)
        logger.info("Handling request", extra={"path": request.path, "http_method": request.method})
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

        result = alb_routes.dispatch(request)
        if result.matched:
            metrics.add_metric(name="RouteMatched", unit=MetricUnit.Count, value=1)
        else:
            logger.info("Handling unknown path", extra={"path": request.path})
            metrics.add_metric(name="RouteNotMatched", unit=MetricUnit.Count, value=1)

        return create_api_response(
            status_code=result.status_code,
            body=result.body,
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
