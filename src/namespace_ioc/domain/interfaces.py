from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Tuple

from namespace_ioc.domain.models import AutoloadRule, Binding, ExtenderEntry, MethodReference


class IContainer(ABC):
    """Abstract interface for namespace-based IoC container operations."""

    @abstractmethod
    def bind(self, namespace: str, factory: Callable[["IContainer"], Any]) -> None:
        """Bind a factory invoked on every resolution of the namespace.

        Args:
            namespace: The namespace to bind.
            factory: Function receiving the container and returning the value.
        """

    @abstractmethod
    def singleton(self, namespace: str, factory: Callable[["IContainer"], Any]) -> None:
        """Bind a factory invoked once, its result shared by every resolution.

        Args:
            namespace: The namespace to bind.
            factory: Function receiving the container and returning the value.
        """

    @abstractmethod
    def manager(self, namespace: str, definition: Any) -> None:
        """Register the extensible manager object of a namespace.

        Args:
            namespace: The namespace the manager belongs to.
            definition: Object exposing ``extend(key, definition)``.
        """

    @abstractmethod
    def extend(self, namespace: str, key: str, factory: Callable[["IContainer"], Any]) -> None:
        """Queue an extension handed to the namespace's manager on resolution.

        Args:
            namespace: The namespace to extend.
            key: Key passed to the manager's ``extend``.
            factory: Function receiving the container and returning the definition.
        """

    @abstractmethod
    def alias(self, key: str, namespace: str) -> None:
        """Make ``key`` resolve to whatever ``namespace`` resolves to."""

    @abstractmethod
    def autoload(self, namespace: str, directory_path: str) -> None:
        """Map a namespace prefix onto a directory of loadable modules."""

    @abstractmethod
    def use(self, namespace: str) -> Any:
        """Resolve a namespace to its value.

        Args:
            namespace: The namespace to resolve.
        """

    @abstractmethod
    def make(self, constructible: type) -> Any:
        """Instantiate a class, injecting its declared dependencies."""

    @abstractmethod
    def make_func(self, reference: str) -> MethodReference:
        """Resolve a ``namespace.method`` reference to an instance and method name."""

    @abstractmethod
    def get_providers(self) -> Mapping[str, Binding]:
        """Get a read-only snapshot of the registered bindings."""

    @abstractmethod
    def get_managers(self) -> Mapping[str, Any]:
        """Get a read-only snapshot of the registered managers."""

    @abstractmethod
    def get_extenders(self) -> Mapping[str, Tuple[ExtenderEntry, ...]]:
        """Get a read-only snapshot of the registered extenders."""

    @abstractmethod
    def get_autoload_rule(self) -> Optional[AutoloadRule]:
        """Get the current autoload rule, if any."""


class IModuleLoader(ABC):
    """Abstract interface for loading the value exported by a file path."""

    @abstractmethod
    def load(self, path: str) -> Any:
        """Load the module at ``path`` and return its exported value.

        Args:
            path: File path computed from an autoload rule.

        Raises:
            ModuleNotFoundError: If nothing exists at the path.
        """


class IDependencyIntrospector(ABC):
    """Abstract interface for discovering the namespaces a class depends on."""

    @abstractmethod
    def declared_dependencies(self, constructible: type) -> List[str]:
        """Return the ordered namespaces the constructor of ``constructible`` requires.

        Args:
            constructible: The class to inspect.
        """
