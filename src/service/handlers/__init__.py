"""
AWS Lambda Handlers Module.

One handler per demo function. Each handler extracts a normalized request
from its platform event, resolves it against a route table (or echoes it),
and returns a JSON response with CORS headers. The handlers use AWS Lambda
Powertools for structured logging, tracing and metrics.

Handler modules are imported directly by the function entry points so that
deploying one function does not initialize the others.
"""

__version__ = "1.0.0"

from service.handlers.utils.observability import logger, tracer

__all__ = [
    "logger",
    "tracer",
]
