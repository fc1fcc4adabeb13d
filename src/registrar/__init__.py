"""Registrar: a small tag and group based component registry.

Components declare themselves available under one or more tags, and optionally
under a group shared with other components. Consumers then ask for a single
instance by tag, or for every member of a group as a tuple. By default the
instances are singletons, cached after their first construction; passing
``singleton=False`` builds fresh ones on every request.

A common pattern is to let consumers fall back on registered defaults while
still accepting explicit dependencies, for example from unit tests.

Basic Usage:
    >>> from registrar import provides, resolve_tag, resolve_group
    >>>
    >>> @provides(tags="database")
    ... class Database:
    ...     pass
    >>>
    >>> @provides(group="plugins")
    ... class AuditPlugin:
    ...     pass
    >>>
    >>> class Service:
    ...     def __init__(self, db=None, plugins=None):
    ...         self.db = db if db is not None else resolve_tag("database")
    ...         self.plugins = (
    ...             plugins if plugins is not None else resolve_group("plugins")
    ...         )

The package consists of several modules:
    - registry: Component registration and introspection
    - resolver: Tag and group resolution with singleton caching
    - defaults: The process-wide registry and resolver behind the functions above
    - tags: Tag normalisation
    - domain: The RegisteredComponent record
    - errors: Registry-specific exceptions
"""

from registrar.defaults import (
    provides,
    register_component,
    resolve,
    resolve_group,
    resolve_tag,
)
from registrar.domain import RegisteredComponent
from registrar.errors import (
    InvalidRegistration,
    InvalidRequest,
    NotFound,
    RegistrarError,
)
from registrar.registry import ComponentRegistry
from registrar.resolver import Resolver

__all__ = [
    "ComponentRegistry",
    "Resolver",
    "RegisteredComponent",
    "RegistrarError",
    "InvalidRegistration",
    "InvalidRequest",
    "NotFound",
    "provides",
    "register_component",
    "resolve",
    "resolve_tag",
    "resolve_group",
]
