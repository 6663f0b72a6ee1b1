"""
Loading module.

Default collaborators of the container: the autoload module loader and the
constructor signature introspector.
"""

from .introspector import SignatureIntrospector
from .module_loader import FileModuleLoader

__all__ = [
    "FileModuleLoader",
    "SignatureIntrospector",
]
