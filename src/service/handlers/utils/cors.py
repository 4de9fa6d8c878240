"""
CORS header policies for the demo handlers.

Each demo function answers browsers from a different example page, so each
carries its own allow-lists. Every response, success or failure, gets the
policy's headers plus the JSON content type.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class CorsPolicy:
    """Configuration for permissive CORS response headers."""

    allow_methods: List[str] = field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allow_headers: List[str] = field(default_factory=lambda: ["Content-Type"])
    allow_origin: str = "*"

    def to_headers(self, allow_origin: Optional[str] = None) -> Dict[str, str]:
        """
        Render the policy as response headers.

        Args:
            allow_origin: Origin overriding the policy default, e.g. from configuration

        Returns:
            Header mapping including the JSON content type
        """
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Access-Control-Allow-Origin": allow_origin or self.allow_origin,
            "Access-Control-Allow-Headers": ", ".join(self.allow_headers),
            "Access-Control-Allow-Methods": ", ".join(self.allow_methods),
        }

    @classmethod
    def alb_policy(cls) -> 'CorsPolicy':
        """Policy for the function behind the Application Load Balancer."""
        return cls(
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type"],
        )

    @classmethod
    def firehose_policy(cls) -> 'CorsPolicy':
        """Policy for the Kinesis Firehose logging test API."""
        return cls(
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    @classmethod
    def s3_logging_policy(cls) -> 'CorsPolicy':
        """Policy for the S3 logging test API."""
        return cls(
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization", "X-API-Key"],
        )
