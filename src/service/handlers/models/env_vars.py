"""
Environment variable models for type-safe configuration.

The demo handlers read a handful of deployment settings from the Lambda
environment and echo some of them back in response bodies. Values that are
empty or differently cased fall back to defaults rather than failing
validation, so a sloppy deployment setting never breaks request handling.
"""

from typing import Annotated, Any, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, field_validator

DEFAULT_ENVIRONMENT = 'dev'


class HandlerEnvVars(BaseModel):
    """Environment variables shared by the demo handlers."""

    # Deployment environment name, echoed by /health and /api/info
    ENVIRONMENT: Annotated[str, Field(
        default=DEFAULT_ENVIRONMENT,
        description='Deployment environment name, empty means dev'
    )] = DEFAULT_ENVIRONMENT

    # Set by the Lambda runtime; absent when running locally
    AWS_REGION: Annotated[Optional[str], Field(
        default=None,
        description='AWS region the function runs in'
    )] = None

    APP_VERSION: Annotated[str, Field(
        default='1.0.0',
        description='Application version string'
    )] = '1.0.0'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='waf-logging-examples',
        description='Service name for AWS Powertools'
    )] = 'waf-logging-examples'

    # Powertools accepts any casing, so only the level name is checked
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origin for API responses'
    )] = '*'

    @field_validator('ENVIRONMENT', mode='before')
    @classmethod
    def default_empty_environment(cls, v: Any) -> Any:
        """Treat an empty ENVIRONMENT as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ENVIRONMENT
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept log level names in any casing."""
        return v.strip().upper() if isinstance(v, str) else v


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
