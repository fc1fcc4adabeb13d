"""
Resolution of registered components into instances.

A Resolver builds instances from the components held in a ComponentRegistry.
Requests name either a tag, which yields one instance, or a group, which yields
a tuple of instances in registration order.

Singleton requests are cached for the lifetime of the resolver: the first
request for a tag or group constructs, every later one returns the cached
result. Non-singleton requests always construct afresh and leave the cache
alone.
"""

import logging
from threading import RLock
from typing import Any, Optional

from registrar.errors import InvalidRequest, NotFound
from registrar.registry import ComponentRegistry

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)


class Resolver:
    """Builds instances for tags and groups, caching singletons.

    Each tag and each group has its own reentrant lock, held across the
    singleton check-construct-cache sequence, so two threads can never both
    construct the singleton for the same tag or group. Constructors may
    resolve their own dependencies on the same thread, or on other threads
    for other keys. A constructor that waits on another thread resolving its
    own tag or group deadlocks.
    """

    def __init__(self, registry: ComponentRegistry, default_singleton: bool = True):
        self._registry = registry
        self._default_singleton = default_singleton
        self._instances: dict[str, Any] = {}
        self._groups: dict[str, tuple[Any, ...]] = {}
        self._key_locks: dict[tuple[str, str], RLock] = {}
        self._lock = RLock()

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    def resolve(
        self,
        tag: Optional[str] = None,
        group: Optional[str] = None,
        singleton: Optional[bool] = None,
    ) -> Any:
        """Resolve either a tag or a group.

        Args:
            tag: The tag of a single component.
            group: The name of a group of components.
            singleton: Whether to reuse cached instances; defaults to the
                resolver's ``default_singleton``.

        Returns:
            An instance for a tag, or a tuple of instances for a group.

        Raises:
            InvalidRequest: If neither or both of tag and group are given.
            NotFound: If nothing is registered under the tag or group.
        """
        if tag and group:
            raise InvalidRequest("Needs either tag or group, not both")
        if tag:
            return self.resolve_tag(tag, singleton)
        if group:
            return self.resolve_group(group, singleton)
        raise InvalidRequest("Needs either tag or group")

    def resolve_tag(self, tag: str, singleton: Optional[bool] = None) -> Any:
        """Build, or fetch from the cache, the component registered under a tag.

        Raises:
            NotFound: If no component is registered under the tag.
        """
        if singleton is None:
            singleton = self._default_singleton

        if not singleton:
            return self._build_tag(tag)

        with self._lock_for("tag", tag):
            if tag in self._instances:
                logger.debug("Reusing singleton for tag %r", tag)
                return self._instances[tag]

            instance = self._build_tag(tag)
            self._instances[tag] = instance
            return instance

    def resolve_group(
        self, group: str, singleton: Optional[bool] = None
    ) -> tuple[Any, ...]:
        """Build, or fetch from the cache, every component in a group.

        Instances are built in registration order. A component registered under
        several tags in the group is built once per tag. The first constructor
        to fail aborts the rest, and nothing is cached.

        Raises:
            NotFound: If the group is unknown or empty.
        """
        if singleton is None:
            singleton = self._default_singleton

        if not singleton:
            return self._build_group(group)

        with self._lock_for("group", group):
            if group in self._groups:
                logger.debug("Reusing singletons for group %r", group)
                return self._groups[group]

            instances = self._build_group(group)
            self._groups[group] = instances
            return instances

    def _lock_for(self, kind: str, key: str) -> RLock:
        with self._lock:
            return self._key_locks.setdefault((kind, key), RLock())

    def _build_tag(self, tag: str) -> Any:
        entry = self._registry.entry_for_tag(tag)
        if entry is None:
            raise NotFound(f"No component found for tag: {tag}")

        logger.debug("Constructing %r for tag %r", entry.target, tag)
        return entry.build()

    def _build_group(self, group: str) -> tuple[Any, ...]:
        entries = self._registry.entries_in_group(group)
        if not entries:
            raise NotFound(f"No component found for group: {group}")

        logger.debug(
            "Constructing %d component(s) for group %r", len(entries), group
        )
        return tuple(entry.build() for entry in entries)
