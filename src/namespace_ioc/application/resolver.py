import inspect
import logging
from typing import Any, List

from namespace_ioc.domain import IContainer, IDependencyIntrospector, InvalidTypeError

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Instantiates classes by resolving their declared dependencies.

    A class declares its dependencies through an ``inject`` attribute holding
    an ordered sequence of namespaces. Classes without one are handed to the
    introspector, which derives the namespaces from the constructor.

    Attributes:
        _introspector: Fallback source of declared dependencies.
    """

    def __init__(self, introspector: IDependencyIntrospector) -> None:
        self._introspector = introspector

    def declared_dependencies(self, constructible: type) -> List[str]:
        """Return the namespaces the class depends on, in constructor order."""
        injections = getattr(constructible, "inject", None)
        if injections is None:
            return list(self._introspector.declared_dependencies(constructible))
        return list(injections)

    def resolve_dependencies(self, constructible: Any, container: IContainer) -> Any:
        """Resolve all declared dependencies and create the instance.

        Args:
            constructible: The class to instantiate.
            container: The container to resolve dependencies from.

        Returns:
            Instance built with the resolved dependencies as positional arguments.

        Raises:
            InvalidTypeError: If ``constructible`` is not a class.

        Example:
            >>> class UserController:
            ...     inject = ["App/Repositories/User", "Mailer"]
            ...
            ...     def __init__(self, users, mailer):
            ...         self.users = users
            ...         self.mailer = mailer
            >>>
            >>> controller = resolver.resolve_dependencies(UserController, container)
        """
        if not inspect.isclass(constructible):
            raise InvalidTypeError(constructible)

        injections = self.declared_dependencies(constructible)
        if not injections:
            return constructible()

        logger.debug("Injecting %s into %s", injections, constructible.__name__)
        # Order matters, constructor parameters are positional
        resolved = [container.use(injection) for injection in injections]
        return constructible(*resolved)
