"""
AWS Lambda Handlers Module.

This module contains the Lambda handler for contact form submissions. The
handler layer checks the request, delegates to the logic layer and turns every
outcome into an API Gateway response.

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
