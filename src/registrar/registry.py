"""Registration and introspection of tagged and grouped components."""

import inspect
import logging
from threading import RLock
from typing import Any, Callable, Optional

from registrar.domain import RegisteredComponent
from registrar.errors import InvalidRegistration
from registrar.tags import TagSpec, normalize_tags

__all__ = ["ComponentRegistry"]

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Registry mapping tags to single components and groups to ordered buckets.

    A tag maps to at most one component: registering a tag again replaces the
    earlier entry, which allows a component to be overridden by redefinition.
    Group buckets keep entries in registration order.
    """

    def __init__(self):
        self._components: dict[str, RegisteredComponent] = {}
        self._groups: dict[str, list[RegisteredComponent]] = {}
        self._lock = RLock()

    def register(
        self,
        target: Callable[[], Any],
        tags: TagSpec = None,
        group: Optional[str] = None,
    ) -> RegisteredComponent:
        """Register a component explicitly.

        The component is stored under every one of its tags. When a group is
        given, the component is appended to that group once per tag, so a
        component holding N tags appears N times in its group.

        Args:
            target: A class or factory callable with zero arguments.
            tags: A tag, a sequence of tags, or None to use the target's name.
            group: Optional name of the group to join.

        Returns:
            The RegisteredComponent stored for the target.

        Raises:
            InvalidRegistration: If the target cannot be constructed without
                arguments, or no tag could be determined.
        """
        _check_constructible(target)
        tag_list = normalize_tags(tags, target)
        entry = RegisteredComponent(target, tag_list, group)

        with self._lock:
            for tag in tag_list:
                if tag in self._components:
                    logger.debug(
                        "Overriding component for tag %r: %r -> %r",
                        tag,
                        self._components[tag].target,
                        target,
                    )
                self._components[tag] = entry
                if group:
                    self._groups.setdefault(group, []).append(entry)

        logger.debug("Registered %r under tags %r, group %r", target, tag_list, group)
        return entry

    def provides(
        self, tags: TagSpec = None, group: Optional[str] = None
    ) -> Callable:
        """Decorator to register a class or factory as a component.

        Args:
            tags: Optional tag or tags; defaults to the decorated object's name.
            group: Optional group the component belongs to.

        Returns:
            A decorator that registers its argument and returns it unchanged.

        Example:
            @registry.provides(tags="database", group="storage")
            class Database:
                pass
        """

        def decorator(target):
            self.register(target, tags, group)
            return target

        return decorator

    def entry_for_tag(self, tag: str) -> Optional[RegisteredComponent]:
        with self._lock:
            return self._components.get(tag)

    def entries_in_group(self, group: str) -> list[RegisteredComponent]:
        """Return a copy of a group's bucket, empty if the group is unknown."""
        with self._lock:
            return list(self._groups.get(group, []))

    def registered_tags(self) -> list[str]:
        with self._lock:
            return list(self._components)

    def registered_groups(self) -> list[str]:
        with self._lock:
            return list(self._groups)

    def __contains__(self, tag: str) -> bool:
        with self._lock:
            return tag in self._components


def _check_constructible(target: Any) -> None:
    if not callable(target):
        raise InvalidRegistration(f"{target!r} is not a class or function")

    try:
        sig = inspect.signature(target)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust them.
        return

    required = [
        name
        for name, param in sig.parameters.items()
        if param.default is inspect.Parameter.empty
        and param.kind
        not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    ]
    if required:
        raise InvalidRegistration(
            f"{target!r} cannot be constructed without arguments: "
            f"parameters {required} have no default"
        )
