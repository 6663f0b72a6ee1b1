"""
namespace-ioc: Namespace based IoC container with providers, managers, aliases and autoloading.

Public API exports for the namespace-ioc package.
"""

import logging

# Application exports
from namespace_ioc.application.container import IocContainer

# Domain exports
from namespace_ioc.domain.enums import Lifetime
from namespace_ioc.domain.exceptions import (
    IncompleteImplementationError,
    InvalidBindingError,
    InvalidExtenderError,
    InvalidTypeError,
    IocException,
    MalformedReferenceError,
    MissingMethodError,
    UnresolvableNamespaceError,
)
from namespace_ioc.domain.models import MethodReference

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Container
    "IocContainer",
    "MethodReference",
    # Enums
    "Lifetime",
    # Exceptions
    "IocException",
    "InvalidBindingError",
    "InvalidExtenderError",
    "IncompleteImplementationError",
    "UnresolvableNamespaceError",
    "InvalidTypeError",
    "MalformedReferenceError",
    "MissingMethodError",
]
