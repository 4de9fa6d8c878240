"""
Route Logic Module.

Route tables mapping request paths to status codes and body builders, one
per demo function, plus the request echo used by the Firehose demo.
"""

__version__ = "1.0.0"

from service.logic.routing import Route, RouteResult, RouteTable

__all__ = [
    "Route",
    "RouteResult",
    "RouteTable",
]
