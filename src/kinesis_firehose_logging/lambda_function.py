"""
Kinesis Firehose Logging - test API for the WAF logging via Firehose example.

Sits behind a WAF-protected REST API whose web ACL logs are delivered by
Kinesis Firehose. Receives REST proxy style events (path, httpMethod,
queryStringParameters, headers) and may also be invoked directly with the
same shape. Every request is echoed back with a 200.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.firehose_handler import lambda_handler as firehose_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the Firehose logging test API.

    Args:
        event: REST proxy style event
        context: Lambda context object

    Returns:
        Proxy integration response dictionary
    """
    return firehose_handler(event, context)
