"""
WAF Logging Examples - Source Package

Demo Lambda backends for the load balancer and WAF logging infrastructure
examples. Each function directory is deployed as its own Lambda function
together with the shared ``service`` package.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
