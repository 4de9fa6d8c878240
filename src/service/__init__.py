"""
WAF Logging Examples Service Module.

Shared implementation behind the demo Lambda functions:

- handlers: Lambda handlers plus observability, CORS and configuration utilities
- logic: Route tables and response body builders
- models: Normalized request/response models and response body schemas
"""

__version__ = "1.0.0"
__description__ = "Demo Lambda backends for ALB and WAF logging examples"

from service.models.request import HttpRequest
from service.models.response import HttpResponse
from service.logic.routing import Route, RouteResult, RouteTable

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "Route",
    "RouteResult",
    "RouteTable",
]
