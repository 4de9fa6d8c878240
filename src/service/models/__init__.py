"""
Service Models Package

Pydantic models for the normalized request, the normalized response and
the response bodies produced by the demo handlers.
"""

from .request import HttpRequest
from .response import HttpResponse
from .output import (
    BotDetectionTestOutput,
    HealthOutput,
    HelloOutput,
    InternalServerErrorOutput,
    NotFoundOutput,
    RateLimitTestOutput,
    RequestEchoOutput,
    ServiceInfoOutput,
    SqlInjectionTestOutput,
    WelcomeOutput,
)

__all__ = [
    # Request/response models
    "HttpRequest",
    "HttpResponse",

    # Body models
    "BotDetectionTestOutput",
    "HealthOutput",
    "HelloOutput",
    "InternalServerErrorOutput",
    "NotFoundOutput",
    "RateLimitTestOutput",
    "RequestEchoOutput",
    "ServiceInfoOutput",
    "SqlInjectionTestOutput",
    "WelcomeOutput",
]
