import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from namespace_ioc.application.extension_manager import ExtensionManager
from namespace_ioc.application.lifetime_manager import LifetimeManager
from namespace_ioc.application.resolver import DependencyResolver
from namespace_ioc.domain import (
    AutoloadRule,
    Binding,
    ExtenderEntry,
    IContainer,
    IDependencyIntrospector,
    IModuleLoader,
    IncompleteImplementationError,
    InvalidBindingError,
    InvalidExtenderError,
    Lifetime,
    MalformedReferenceError,
    MethodReference,
    MissingMethodError,
    Registration,
    UnresolvableNamespaceError,
)
from namespace_ioc.infrastructure.loading import FileModuleLoader, SignatureIntrospector

logger = logging.getLogger(__name__)


class IocContainer(IContainer):
    """Namespace based inversion of control container.

    Maps string namespaces to factories, manager objects, extenders, aliases
    and a single autoload rule. Every lookup goes through `use`, which tries
    in order: a bound provider, the autoload rule, an alias.

    Attributes:
        _bindings: Namespace to binding (registration plus singleton cache).
        _managers: Namespace to manager object exposing ``extend``.
        _extenders: Namespace to extender entries in registration order.
        _aliases: Alias namespace to target namespace.
        _autoload_rule: The single autoload rule, if registered.
        _loader: Loads the value exported by an autoloaded file path.
        _introspector: Fallback source of declared dependencies for `make`.
        _resolver: Instantiates classes from their declared dependencies.
        _lifetime_manager: Applies transient and singleton semantics.
        _extension_manager: Applies extenders to managers.
        _lock: Guards the registries against concurrent registration.
    """

    def __init__(
        self,
        loader: Optional[IModuleLoader] = None,
        introspector: Optional[IDependencyIntrospector] = None,
    ) -> None:
        """Initialize the container with empty registries.

        Args:
            loader: Module loader used for autoloaded namespaces. Defaults to `FileModuleLoader`.
            introspector: Fallback dependency introspector for `make`. Defaults to `SignatureIntrospector`.
        """
        self._bindings: Dict[str, Binding] = {}
        self._managers: Dict[str, Any] = {}
        self._extenders: Dict[str, List[ExtenderEntry]] = {}
        self._aliases: Dict[str, str] = {}
        self._autoload_rule: Optional[AutoloadRule] = None
        self._loader: IModuleLoader = loader or FileModuleLoader()
        self._introspector: IDependencyIntrospector = introspector or SignatureIntrospector()
        self._resolver = DependencyResolver(self._introspector)
        self._lifetime_manager = LifetimeManager()
        self._extension_manager = ExtensionManager()
        self._lock = threading.RLock()

    def _bind(self, namespace: str, factory: Callable[[IContainer], Any], lifetime: Lifetime) -> None:
        """Internal registration method with validation.

        Args:
            namespace: The namespace to bind.
            factory: Factory function receiving the container.
            lifetime: How long resolved values live.

        Raises:
            InvalidBindingError: If the factory is not callable.
        """
        if not callable(factory):
            raise InvalidBindingError(namespace)

        registration = Registration(namespace=namespace, factory=factory, lifetime=lifetime)

        with self._lock:
            # Last registration wins
            self._bindings[namespace] = Binding(registration=registration)
        logger.debug("Bound %s as %s", namespace, lifetime)

    def bind(self, namespace: str, factory: Callable[[IContainer], Any]) -> None:
        """Bind a namespace to a factory executed on every resolution.

        Args:
            namespace: The namespace to bind.
            factory: Function receiving the container and returning the value.

        Raises:
            InvalidBindingError: If the factory is not callable.

        Example:
            >>> container.bind("App/Request", lambda c: Request(c.use("Config")))
        """
        self._bind(namespace, factory, Lifetime.TRANSIENT)

    def singleton(self, namespace: str, factory: Callable[[IContainer], Any]) -> None:
        """Bind a namespace to a factory executed once and then cached.

        Args:
            namespace: The namespace to bind.
            factory: Function receiving the container and returning the value.

        Raises:
            InvalidBindingError: If the factory is not callable.

        Example:
            >>> container.singleton("Config", lambda c: Config.from_env())
        """
        self._bind(namespace, factory, Lifetime.SINGLETON)

    def manager(self, namespace: str, definition: Any) -> None:
        """Register the manager object exposed by a namespace for extension.

        Args:
            namespace: The namespace the manager belongs to.
            definition: Object exposing ``extend(key, definition)``.

        Raises:
            IncompleteImplementationError: If ``definition`` has no callable ``extend``.
        """
        if not callable(getattr(definition, "extend", None)):
            raise IncompleteImplementationError(namespace)

        with self._lock:
            self._managers[namespace] = definition
        logger.debug("Registered manager for %s", namespace)

    def extend(self, namespace: str, key: str, factory: Callable[[IContainer], Any]) -> None:
        """Queue an extension for the manager of a namespace.

        The factory runs each time the namespace is resolved and its result is
        passed to the manager as ``manager.extend(key, result)``.

        Args:
            namespace: The namespace to extend.
            key: Key handed to the manager.
            factory: Function receiving the container and returning the definition.

        Raises:
            InvalidExtenderError: If the factory is not callable.

        Example:
            >>> container.extend("Cache", "redis", lambda c: RedisStore(c.use("Config")))
        """
        if not callable(factory):
            raise InvalidExtenderError(namespace, key)

        entry = ExtenderEntry(namespace=namespace, key=key, factory=factory)
        with self._lock:
            self._extenders.setdefault(namespace, []).append(entry)
        logger.debug("Registered extender %s for %s", key, namespace)

    def alias(self, key: str, namespace: str) -> None:
        """Alias ``key`` to ``namespace``; resolution follows the full `use` chain.

        Args:
            key: The alias.
            namespace: The namespace the alias points to.
        """
        with self._lock:
            self._aliases[key] = namespace
        logger.debug("Aliased %s to %s", key, namespace)

    def autoload(self, namespace: str, directory_path: str) -> None:
        """Treat namespaces prefixed by ``namespace`` as files under ``directory_path``.

        Only one autoload rule exists at a time; a new one replaces the old.

        Args:
            namespace: The namespace prefix, e.g. ``App``.
            directory_path: The directory the prefix maps onto.

        Example:
            >>> container.autoload("App", "/srv/project/app")
            >>> container.use("App/Services/Mailer")  # loads /srv/project/app/Services/Mailer.py
        """
        with self._lock:
            self._autoload_rule = AutoloadRule(namespace=namespace, directory_path=directory_path)
        logger.debug("Autoloading %s from %s", namespace, directory_path)

    def use(self, namespace: str) -> Any:
        """Resolve a namespace.

        Precedence: bound provider (after applying pending extenders),
        autoload path, alias. The first rule that matches wins.

        Args:
            namespace: The namespace to resolve.

        Returns:
            The resolved value.

        Raises:
            UnresolvableNamespaceError: If no rule matches the namespace.
            ModuleNotFoundError: If the autoloaded file does not exist.

        Example:
            >>> mailer = container.use("App/Services/Mailer")
        """
        with self._lock:
            binding = self._bindings.get(namespace)
            manager = self._managers.get(namespace)
            extenders = tuple(self._extenders.get(namespace, ()))
            rule = self._autoload_rule
            target = self._aliases.get(namespace)

        if binding is not None:
            if manager is not None and extenders:
                self._extension_manager.apply(manager, extenders, self)
            return self._lifetime_manager.get_or_create(
                binding,
                lambda: binding.registration.factory(self),
            )

        if rule is not None and rule.matches(namespace):
            path = rule.to_path(namespace)
            logger.debug("Autoloading %s from %s", namespace, path)
            return self._loader.load(path)

        if target is not None:
            logger.debug("Resolving alias %s -> %s", namespace, target)
            return self.use(target)

        raise UnresolvableNamespaceError(namespace)

    def make(self, constructible: type) -> Any:
        """Instantiate a class, resolving its declared dependencies through `use`.

        Dependencies are read from the class's ``inject`` attribute, falling
        back to the introspector.

        Args:
            constructible: The class to instantiate.

        Returns:
            The new instance.

        Raises:
            InvalidTypeError: If ``constructible`` is not a class.

        Example:
            >>> class UserController:
            ...     inject = ["App/Repositories/User"]
            ...
            ...     def __init__(self, users):
            ...         self.users = users
            >>>
            >>> controller = container.make(UserController)
        """
        return self._resolver.resolve_dependencies(constructible, self)

    def make_func(self, reference: str) -> MethodReference:
        """Resolve a ``namespace.method`` reference.

        The namespace is resolved with `use` and the result is passed through
        `make`, so the provider must yield a class.

        Args:
            reference: A string such as ``"App/Http/UserController.index"``.

        Returns:
            The instance and the verified method name. Calling it is up to the caller.

        Raises:
            MalformedReferenceError: If the reference is not exactly two dot-separated parts.
            MissingMethodError: If the instance has no such method.
        """
        parts = reference.split(".")
        if len(parts) != 2 or not all(parts):
            raise MalformedReferenceError(reference)

        namespace, method = parts
        instance = self.make(self.use(namespace))

        if not callable(getattr(instance, method, None)):
            raise MissingMethodError(method, instance)
        return MethodReference(instance=instance, method=method)

    def get_providers(self) -> Mapping[str, Binding]:
        """Get a read-only snapshot of the registered bindings."""
        with self._lock:
            return MappingProxyType(dict(self._bindings))

    def get_managers(self) -> Mapping[str, Any]:
        """Get a read-only snapshot of the registered managers."""
        with self._lock:
            return MappingProxyType(dict(self._managers))

    def get_extenders(self) -> Mapping[str, Tuple[ExtenderEntry, ...]]:
        """Get a read-only snapshot of the registered extenders."""
        with self._lock:
            return MappingProxyType({namespace: tuple(entries) for namespace, entries in self._extenders.items()})

    def get_aliases(self) -> Mapping[str, str]:
        """Get a read-only snapshot of the registered aliases."""
        with self._lock:
            return MappingProxyType(dict(self._aliases))

    def get_autoload_rule(self) -> Optional[AutoloadRule]:
        """Get the current autoload rule, if any."""
        with self._lock:
            return self._autoload_rule

    def get_registry_copy(self) -> Dict[str, Any]:
        """Get a shallow copy of every registry, used to seed test containers.

        Singletons the source container already resolved keep their binding, so
        the cached instance stays shared. Unresolved bindings get a fresh
        cache, so values built by the copy never leak back into the source.

        Returns:
            Dictionary with ``bindings``, ``managers``, ``extenders``, ``aliases`` and ``autoload_rule`` keys.
        """
        with self._lock:
            return {
                "bindings": {
                    namespace: binding if binding.is_resolved else Binding(registration=binding.registration)
                    for namespace, binding in self._bindings.items()
                },
                "managers": dict(self._managers),
                "extenders": {namespace: list(entries) for namespace, entries in self._extenders.items()},
                "aliases": dict(self._aliases),
                "autoload_rule": self._autoload_rule,
            }

    def set_registry(self, registry: Dict[str, Any]) -> None:
        """Replace every registry with the contents of a `get_registry_copy` result.

        Args:
            registry: Registries to adopt.
        """
        with self._lock:
            self._bindings = dict(registry["bindings"])
            self._managers = dict(registry["managers"])
            self._extenders = {namespace: list(entries) for namespace, entries in registry["extenders"].items()}
            self._aliases = dict(registry["aliases"])
            self._autoload_rule = registry["autoload_rule"]

    def clear(self) -> None:
        """Clear all registrations and cached instances.

        Useful for testing or resetting the container state.
        """
        with self._lock:
            self._bindings.clear()
            self._managers.clear()
            self._extenders.clear()
            self._aliases.clear()
            self._autoload_rule = None
