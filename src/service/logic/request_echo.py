"""Echo payload for the Kinesis Firehose logging demo API."""

from service.handlers.utils.observability import tracer
from service.models.output import RequestEchoOutput
from service.models.request import HttpRequest

ECHO_MESSAGE = 'Hello from WAF Kinesis Firehose Test API!'


@tracer.capture_method
def build_request_echo(request: HttpRequest) -> RequestEchoOutput:
    """Reflect the request back so WAF log records can be matched to responses."""
    return RequestEchoOutput(
        message=ECHO_MESSAGE,
        path=request.path,
        method=request.method,
        query_string_parameters=dict(request.query_string_parameters),
        headers=dict(request.headers),
    )
