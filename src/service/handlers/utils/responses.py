"""Response construction helpers shared by the handlers."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel

from service.handlers.utils.cors import CorsPolicy
from service.models.output import InternalServerErrorOutput, dump_body
from service.models.response import HttpResponse


def create_api_response(
    status_code: int,
    body: BaseModel,
    cors: CorsPolicy,
    allow_origin: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a proxy integration response with JSON and CORS headers attached."""
    response = HttpResponse(
        status_code=status_code,
        headers=cors.to_headers(allow_origin),
        body=json.dumps(dump_body(body)),
    )
    return response.to_lambda_response()


def create_error_response(
    request_id: str,
    cors: CorsPolicy,
    allow_origin: Optional[str] = None,
) -> Dict[str, Any]:
    """Create the 500 response returned when a handler fails unexpectedly."""
    return create_api_response(
        status_code=500,
        body=InternalServerErrorOutput(request_id=request_id),
        cors=cors,
        allow_origin=allow_origin,
    )
