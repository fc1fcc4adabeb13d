"""Process-wide registry and resolver, with module-level entry points.

Components registered here live for the remainder of the process: they are
populated at import time and never torn down.
"""

from typing import Any, Callable, Optional

from registrar.domain import RegisteredComponent
from registrar.registry import ComponentRegistry
from registrar.resolver import Resolver
from registrar.tags import TagSpec

__all__ = [
    "registry",
    "resolver",
    "register_component",
    "provides",
    "resolve",
    "resolve_tag",
    "resolve_group",
]


registry = ComponentRegistry()
resolver = Resolver(registry)


def register_component(
    target: Callable[[], Any], tags: TagSpec = None, group: Optional[str] = None
) -> RegisteredComponent:
    """Register a component with the process-wide registry.

    See :meth:`ComponentRegistry.register`.
    """
    return registry.register(target, tags, group)


def provides(tags: TagSpec = None, group: Optional[str] = None) -> Callable:
    """Decorator registering a class or factory with the process-wide registry.

    Example:
        @provides(tags="first_dependency")
        class FirstDependency:
            def get(self) -> str:
                return "FirstDependency"

        class Example:
            def __init__(self, first=None):
                self.first = (
                    first if first is not None else resolve_tag("first_dependency")
                )
    """
    return registry.provides(tags, group)


def resolve(
    tag: Optional[str] = None, group: Optional[str] = None, singleton: bool = True
) -> Any:
    return resolver.resolve(tag=tag, group=group, singleton=singleton)


def resolve_tag(tag: str, singleton: bool = True) -> Any:
    return resolver.resolve_tag(tag, singleton)


def resolve_group(group: str, singleton: bool = True) -> tuple[Any, ...]:
    return resolver.resolve_group(group, singleton)
