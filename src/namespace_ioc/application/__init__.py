"""
Application layer - Use cases and orchestration.

This layer contains the container and the components it orchestrates.
"""

from .container import IocContainer
from .extension_manager import ExtensionManager
from .lifetime_manager import LifetimeManager
from .resolver import DependencyResolver

__all__ = [
    "IocContainer",
    "DependencyResolver",
    "LifetimeManager",
    "ExtensionManager",
]
