"""
Domain layer - Core models, contracts and errors.

This layer contains the value objects and interfaces of the IoC container.
It has no dependencies on other layers.
"""

from .enums import Lifetime
from .exceptions import (
    IncompleteImplementationError,
    InvalidBindingError,
    InvalidExtenderError,
    InvalidTypeError,
    IocException,
    MalformedReferenceError,
    MissingMethodError,
    UnresolvableNamespaceError,
)
from .interfaces import IContainer, IDependencyIntrospector, IModuleLoader
from .models import AutoloadRule, Binding, ExtenderEntry, MethodReference, Registration

# Rebuild Pydantic models to resolve forward references
Registration.model_rebuild()
ExtenderEntry.model_rebuild()
Binding.model_rebuild()

__all__ = [
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
    # Interfaces
    "IContainer",
    "IModuleLoader",
    "IDependencyIntrospector",
    # Models
    "Registration",
    "Binding",
    "ExtenderEntry",
    "AutoloadRule",
    "MethodReference",
]
