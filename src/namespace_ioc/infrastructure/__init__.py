"""
Infrastructure layer - External integrations.

This layer contains the default module loader and introspector, plus
integrations with external frameworks and tools. Submodules are imported
explicitly so optional integrations stay optional.
"""
