"""
Normalized HTTP response model.

HttpResponse is what every handler builds before handing the result back to
the platform in the Lambda proxy integration shape.
"""

import json
from typing import Annotated, Any, Dict

from pydantic import BaseModel, Field, field_validator


class HttpResponse(BaseModel):
    """Response description returned by all handlers."""

    status_code: Annotated[int, Field(
        ge=100,
        le=599,
        description='HTTP status code',
        examples=[200, 404]
    )]

    headers: Annotated[Dict[str, str], Field(
        default_factory=dict,
        description='Response headers'
    )]

    body: Annotated[str, Field(
        description='Serialized JSON body'
    )]

    @field_validator('body')
    @classmethod
    def validate_json_body(cls, v: str) -> str:
        """Validate that the body is a JSON document."""
        try:
            json.loads(v)
        except ValueError as exc:
            raise ValueError(f'body must be valid JSON: {exc}') from exc
        return v

    def to_lambda_response(self) -> Dict[str, Any]:
        """Render in the shape ALB and API Gateway proxy integrations expect."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
