"""
S3 Logging - test API for the WAF logging to S3 example.

Integrated with an HTTP API using payload format 2.0, so request details
arrive under requestContext.http. The web ACL in front of the API writes its
logs straight to S3; /test-sql, /test-bot and /test-rate-limit exist to trip
the matching managed rules. Unknown paths get a welcome payload.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.s3_logging_handler import lambda_handler as s3_logging_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the S3 logging test API.

    Args:
        event: HTTP API (payload format 2.0) event
        context: Lambda context object

    Returns:
        Proxy integration response dictionary
    """
    return s3_logging_handler(event, context)
