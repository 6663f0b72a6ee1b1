"""
FastAPI integration module.

Provides helpers for resolving namespaces from an IoC container in FastAPI apps.
"""

from .integration import (
    ContainerMiddleware,
    create_fastapi_dependency,
    create_method_dependency,
    create_request_dependency,
)

__all__ = [
    "create_fastapi_dependency",
    "create_method_dependency",
    "create_request_dependency",
    "ContainerMiddleware",
]
