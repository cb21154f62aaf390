"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and logging in ``core``, request and response
models in ``schemas``, business logic in ``services``, persistence
backends in ``stores`` and HTTP routes in ``api``.
"""

from .main import app  # noqa: F401
