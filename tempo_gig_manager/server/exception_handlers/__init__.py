"""
Exception handlers for the Tempo API server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from .global_handler import required_fields_message, setup_exception_handlers

__all__ = ["required_fields_message", "setup_exception_handlers"]
