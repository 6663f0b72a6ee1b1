import logging
from typing import Any, Callable

from namespace_ioc.domain import Binding, Lifetime

logger = logging.getLogger(__name__)


class LifetimeManager:
    """Produces values for bindings according to their lifetime.

    Transient bindings call their factory on every resolution. Singleton
    bindings call it once and keep the result on the binding itself, so the
    cache lives exactly as long as the binding does.
    """

    def get_or_create(self, binding: Binding, factory: Callable[[], Any]) -> Any:
        """Get the cached value or create a new one based on lifetime.

        Args:
            binding: The binding being resolved.
            factory: Function creating a new value.

        Returns:
            A fresh value for transient bindings, the cached value for singletons.

        Example:
            >>> binding = Binding(
            ...     registration=Registration(
            ...         namespace="App/Mailer",
            ...         factory=lambda c: Mailer(),
            ...         lifetime=Lifetime.SINGLETON,
            ...     )
            ... )
            >>> mailer = manager.get_or_create(binding, lambda: Mailer())
        """
        if binding.registration.lifetime == Lifetime.TRANSIENT:
            return factory()

        if binding.is_resolved:
            return binding.cached_instance

        # First resolution must run the factory exactly once across threads
        with binding.lock:
            if not binding.is_resolved:
                logger.debug("Creating singleton instance for %s", binding.namespace)
                binding.cached_instance = factory()
                binding.is_resolved = True
        return binding.cached_instance
