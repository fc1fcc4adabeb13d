"""Domain models used throughout the registry."""

from dataclasses import dataclass
from typing import Callable, Any, Optional


@dataclass(frozen=True)
class RegisteredComponent:
    """Binds a constructible component to its tags and optional group.

    Attributes:
        target: The class (or zero-argument factory) invoked to build an instance.
        tags: Every tag the component was registered under, in declaration order.
        group: The group bucket the component joined, if any.
    """

    target: Callable[[], Any]
    tags: tuple[str, ...]
    group: Optional[str]

    def build(self) -> Any:
        return self.target()
