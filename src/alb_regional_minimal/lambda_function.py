"""
ALB Regional Minimal - backend for the regional Application Load Balancer example.

Registered as the Lambda target of an ALB target group. The load balancer
forwards every listener request here as an ALB target event (path,
httpMethod, headers, queryStringParameters). Answers /health, /api/hello, /api/info and /,
and 404 otherwise.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.alb_handler import lambda_handler as alb_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the ALB example.

    Args:
        event: ALB target group event
        context: Lambda context object

    Returns:
        Proxy integration response dictionary
    """
    return alb_handler(event, context)
