"""
Normalized HTTP request model.

Each demo function receives a differently shaped event from its platform
(ALB, REST-style proxy invoke, HTTP API). The constructors on HttpRequest
flatten those envelopes into one immutable model. Extraction never fails:
missing or malformed fields fall back to safe defaults.
"""

from typing import Annotated, Any, Dict, Mapping, Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field

logger = Logger()


def _as_mapping(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _as_text(value: Any, default: Optional[str] = None) -> Optional[str]:
    if value is None or value == '':
        return default
    return value if isinstance(value, str) else str(value)


class HttpRequest(BaseModel):
    """Request description shared by all handlers."""

    model_config = ConfigDict(frozen=True)

    method: Annotated[str, Field(
        default='GET',
        description='HTTP method',
        examples=['GET', 'POST']
    )] = 'GET'

    path: Annotated[str, Field(
        default='/',
        description='Request path, matched exactly against route tables',
        examples=['/health', '/api/hello']
    )] = '/'

    headers: Annotated[Dict[str, Any], Field(
        default_factory=dict,
        description='Request headers, values passed through unvalidated'
    )]

    query_string_parameters: Annotated[Dict[str, Any], Field(
        default_factory=dict,
        description='Query string parameters, values passed through unvalidated'
    )]

    source_ip: Annotated[Optional[str], Field(
        default=None,
        description='Client IP address when the platform provides it',
        examples=['203.0.113.10']
    )] = None

    def header(self, name: str, default: Any = None) -> Any:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @classmethod
    def from_alb_event(cls, event: Mapping[str, Any]) -> 'HttpRequest':
        """Build a request from an Application Load Balancer target event."""
        query = event.get('queryStringParameters') or event.get('multiValueQueryStringParameters')
        return cls(
            method=_as_text(event.get('httpMethod'), 'GET'),
            path=_as_text(event.get('path'), '/'),
            headers=_as_mapping(event.get('headers')),
            query_string_parameters=_as_mapping(query),
        )

    @classmethod
    def from_proxy_event(cls, event: Mapping[str, Any]) -> 'HttpRequest':
        """Build a request from a REST proxy style event invoked directly."""
        request_context = _as_mapping(event.get('requestContext'))
        identity = _as_mapping(request_context.get('identity'))
        return cls(
            method=_as_text(event.get('httpMethod'), 'GET'),
            path=_as_text(event.get('path'), '/'),
            headers=_as_mapping(event.get('headers')),
            query_string_parameters=_as_mapping(event.get('queryStringParameters')),
            source_ip=_as_text(identity.get('sourceIp')),
        )

    @classmethod
    def from_http_api_event(cls, event: Mapping[str, Any]) -> 'HttpRequest':
        """
        Build a request from an HTTP API (payload format 2.0) event.

        Request details are read from requestContext.http first. Headers,
        query parameters and path fall back to the top-level event keys.
        A missing requestContext.http yields a defaulted request.
        """
        http = _as_mapping(_as_mapping(event.get('requestContext')).get('http'))
        if not http:
            logger.warning(
                "Event has no requestContext.http block, using defaults",
                extra={"event_keys": sorted(str(key) for key in event)},
            )

        headers = http.get('headers') or event.get('headers')
        query = http.get('queryStringParameters') or event.get('queryStringParameters')
        return cls(
            method=_as_text(http.get('method'), 'GET'),
            path=_as_text(http.get('path') or event.get('rawPath'), '/'),
            headers=_as_mapping(headers),
            query_string_parameters=_as_mapping(query),
            source_ip=_as_text(http.get('sourceIp')),
        )
