"""Application layer - Manager extension protocol."""

import logging
from typing import Any, Sequence

from namespace_ioc.domain import ExtenderEntry, IContainer

logger = logging.getLogger(__name__)


class ExtensionManager:
    """Hands pending extender definitions to a namespace's manager.

    Extenders are applied on every resolution of their namespace, in the
    order they were registered. Whether repeated ``extend`` calls for one key
    are harmless is up to the manager.
    """

    def apply(self, manager: Any, extenders: Sequence[ExtenderEntry], container: IContainer) -> None:
        """Build each extender's definition and pass it to ``manager.extend``.

        Args:
            manager: The namespace's manager object.
            extenders: Extender entries in registration order.
            container: Container handed to each extender factory.
        """
        for entry in extenders:
            definition = entry.factory(container)
            logger.debug("Extending %s with %s", entry.namespace, entry.key)
            manager.extend(entry.key, definition)
