import threading
from typing import TYPE_CHECKING, Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from namespace_ioc.domain.enums import Lifetime

if TYPE_CHECKING:
    from namespace_ioc.domain.interfaces import IContainer


class Registration(BaseModel):
    """Value object representing a namespace binding registration.

    Attributes:
        namespace: The namespace the factory is bound to.
        factory: Function that receives the container and returns the bound value.
        lifetime: How long the resolved value should live.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    namespace: str = Field(..., description="The namespace to be registered.")
    factory: Callable[["IContainer"], Any] = Field(
        ..., description="The factory function producing the bound value."
    )
    lifetime: Lifetime = Field(..., description="The lifetime of the bound value.")


class Binding(BaseModel):
    """Tracks a registration together with its cached singleton value.

    The cache is filled at most once and never invalidated. `is_resolved`
    tells an absent cache apart from a factory that returned None.

    Attributes:
        registration: The original registration.
        cached_instance: Cached value for singleton bindings.
        is_resolved: Whether the singleton cache has been populated.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    registration: Registration = Field(..., description="The registration details of the binding.")
    cached_instance: Optional[Any] = Field(
        default=None,
        description="Cached value for singleton bindings.",
    )
    is_resolved: bool = Field(
        default=False,
        description="Whether the singleton cache has been populated.",
    )

    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @property
    def namespace(self) -> str:
        return self.registration.namespace

    @property
    def lock(self) -> Any:
        """Lock serializing the first resolution of a singleton."""
        return self._lock


class ExtenderEntry(BaseModel):
    """A deferred contribution applied to a namespace's manager on resolution.

    Attributes:
        namespace: The namespace whose manager receives the extension.
        key: Name passed to the manager's ``extend`` method.
        factory: Function that receives the container and returns the definition.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    namespace: str = Field(..., description="The namespace being extended.")
    key: str = Field(..., description="The key handed to the manager.")
    factory: Callable[["IContainer"], Any] = Field(..., description="Factory producing the extension definition.")


class AutoloadRule(BaseModel):
    """Maps a namespace prefix onto a directory so namespaces become file paths.

    Attributes:
        namespace: The namespace prefix, e.g. ``App``.
        directory_path: Directory that replaces the prefix, e.g. ``/srv/app``.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., description="Namespace prefix handled by this rule.")
    directory_path: str = Field(..., description="Directory the prefix maps onto.")

    def matches(self, namespace: str) -> bool:
        """Check whether a namespace falls under this rule's prefix."""
        return namespace.startswith(self.namespace)

    def to_path(self, namespace: str) -> str:
        """Rewrite a matching namespace into a file path.

        Example:
            >>> AutoloadRule(namespace="App", directory_path="/srv/app").to_path("App/Services/Mailer")
            '/srv/app/Services/Mailer'
        """
        return self.directory_path + namespace[len(self.namespace) :]


class MethodReference(BaseModel):
    """Result of ``make_func``: an instance and the name of one of its methods.

    Attributes:
        instance: The dependency-injected instance.
        method: The method name, verified to exist on the instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    instance: Any = Field(..., description="The instance the method belongs to.")
    method: str = Field(..., description="Name of the method on the instance.")

    def bound(self) -> Callable[..., Any]:
        """Return the bound method, ready to be invoked by the caller."""
        return getattr(self.instance, self.method)
