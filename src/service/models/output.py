"""
Output models for response bodies using Pydantic.

Every body carries a UTC timestamp. Field names that the demo clients expect
in camelCase are exposed through serialization aliases, so bodies must be
dumped with ``by_alias=True`` (see ``dump_body``).
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def dump_body(body: BaseModel) -> Dict[str, Any]:
    """Serialize a body model into JSON-compatible primitives, leaving out unset optionals."""
    return body.model_dump(mode='json', by_alias=True, exclude_none=True)


class TimestampedOutput(BaseModel):
    """Base model for all response bodies."""

    timestamp: Annotated[str, Field(
        default_factory=utc_timestamp,
        description='UTC time the response was built',
        examples=['2024-01-01T12:00:00.000Z']
    )]


class HealthOutput(TimestampedOutput):
    """Health check body."""

    status: Annotated[str, Field(
        default='healthy',
        description='Health status',
        examples=['healthy']
    )] = 'healthy'

    environment: Annotated[Optional[str], Field(
        default=None,
        description='Deployment environment, omitted by variants that do not report it'
    )] = None


class WelcomeOutput(TimestampedOutput):
    """Welcome body listing the available endpoints."""

    message: str
    endpoints: List[str]


class NotFoundOutput(TimestampedOutput):
    """Body returned for paths missing from a route table."""

    error: str = 'Not Found'
    message: str

    @classmethod
    def for_path(cls, path: str) -> 'NotFoundOutput':
        return cls(message=f'Path {path} not found')


class HelloOutput(TimestampedOutput):
    """Body for the ALB hello endpoint."""

    message: str = 'Hello from Lambda!'
    method: str
    path: str


class ServiceInfoOutput(TimestampedOutput):
    """Body for the ALB service information endpoint."""

    service: str
    version: str
    environment: str
    region: Annotated[Optional[str], Field(
        default=None,
        description='AWS region, omitted when not running inside Lambda'
    )] = None


class RequestEchoOutput(TimestampedOutput):
    """Body that echoes the received request back to the caller."""

    message: str
    path: str
    method: str
    query_string_parameters: Annotated[Dict[str, Any], Field(
        serialization_alias='queryStringParameters'
    )]
    headers: Dict[str, Any]


class SqlInjectionTestOutput(TimestampedOutput):
    """Body for the endpoint used to trigger SQL injection rules."""

    message: str = 'SQL injection test endpoint'
    query: Dict[str, Any]


class BotDetectionTestOutput(TimestampedOutput):
    """Body for the endpoint used to trigger bot control rules."""

    message: str = 'Bot detection test endpoint'
    user_agent: Annotated[Any, Field(serialization_alias='userAgent')]


class RateLimitTestOutput(TimestampedOutput):
    """Body for the endpoint used to trigger rate based rules."""

    message: str = 'Rate limit test endpoint'
    client_ip: Annotated[Optional[str], Field(serialization_alias='clientIp')] = None


class InternalServerErrorOutput(TimestampedOutput):
    """Body returned when a handler fails unexpectedly."""

    message: str = 'Internal server error'
    request_id: str
