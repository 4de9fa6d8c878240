"""
Centralized observability utilities for the demo handlers.

Configured instances of AWS Lambda Powertools for logging and tracing, used
by the models and route logic that run outside a specific handler module.
Each handler module owns its own Logger, Tracer and Metrics instances.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.tracing import Tracer

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "True"
tracer: Tracer = Tracer()
