from typing import Any


class IocException(Exception):
    """Base exception for IoC container errors."""


class InvalidBindingError(IocException):
    """Raised when `bind` or `singleton` receives a non-callable factory.

    Attributes:
        namespace: The namespace the binding was registered under.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Invalid arguments, bind expects a callable factory for namespace: {namespace}")


class InvalidExtenderError(IocException):
    """Raised when `extend` receives a non-callable factory.

    Attributes:
        namespace: The namespace being extended.
        key: The extension key.
    """

    def __init__(self, namespace: str, key: str) -> None:
        self.namespace = namespace
        self.key = key
        super().__init__(f"Invalid arguments, extend expects a callable factory for {namespace} ({key})")


class IncompleteImplementationError(IocException):
    """Raised when a manager definition does not expose an `extend` method.

    Attributes:
        namespace: The namespace the manager was registered under.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Incomplete implementation, manager objects should have extend method (namespace: {namespace})"
        )


class UnresolvableNamespaceError(IocException):
    """Raised when a namespace matches no binding, autoload rule or alias.

    Attributes:
        namespace: The namespace that could not be resolved.
    """

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"Unable to resolve {namespace}")


class InvalidTypeError(IocException):
    """Raised when `make` receives something that is not a class.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid type, you can only make class instances using make method (got {type(value).__name__})"
        )


class MalformedReferenceError(IocException):
    """Raised when a `make_func` reference is not of the form ``namespace.method``.

    Attributes:
        reference: The rejected reference string.
    """

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"Unable to make {reference}, expected a 'namespace.method' reference")


class MissingMethodError(IocException):
    """Raised when the instance built by `make_func` lacks the requested method.

    Attributes:
        method: The requested method name.
        instance: The instance that was built.
    """

    def __init__(self, method: str, instance: Any) -> None:
        self.method = method
        self.instance = instance
        super().__init__(f"{method} does not exist on {type(instance).__name__}")
