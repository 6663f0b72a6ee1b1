from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a bound value lives once resolved.

    Attributes:
        TRANSIENT: Factory is invoked on every resolution.
        SINGLETON: Factory is invoked once, the result is cached for the container's lifetime.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value
