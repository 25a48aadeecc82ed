"""
Middleware modules for the Tempo API server.

This package contains custom middleware for request timing and tracing.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
