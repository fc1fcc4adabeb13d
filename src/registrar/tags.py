"""Normalisation of the tags a component is registered under."""

from typing import Any, Optional, Sequence, Union

from registrar.errors import InvalidRegistration

__all__ = ["TagSpec", "inferred_name", "normalize_tags"]


TagSpec = Union[str, Sequence[str], None]


def inferred_name(target: Any) -> Optional[str]:
    """Derive the intrinsic name of a component.

    Args:
        target: The class or factory being registered.

    Returns:
        The target's ``__name__``, or None if it has no usable name.

    Example:
        >>> inferred_name(Database)                       # Returns "Database"
        >>> inferred_name(functools.partial(Database))    # Returns None
    """
    name = getattr(target, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return None


def normalize_tags(tags: TagSpec, target: Any) -> tuple[str, ...]:
    """Turn a user-supplied tag specification into the tags to register under.

    A single string becomes a one-element tuple and a sequence is taken as-is.
    When nothing (or something empty) is supplied, the target's intrinsic name
    is used instead.

    Args:
        tags: None, a string, or a sequence of strings.
        target: The component the tags belong to.

    Returns:
        A non-empty tuple of tags.

    Raises:
        InvalidRegistration: If the sequence holds non-string items, or if no
            tag was supplied and the target has no name to fall back on.
    """
    if tags is None:
        tag_list = []
    elif isinstance(tags, str):
        tag_list = [tags] if tags else []
    else:
        tag_list = list(tags)
        invalid = [tag for tag in tag_list if not isinstance(tag, str)]
        if invalid:
            raise InvalidRegistration(f"Tags must be strings, got {invalid!r}")

    if not tag_list:
        name = inferred_name(target)
        if name:
            tag_list = [name]

    if not tag_list:
        raise InvalidRegistration(f"No tags provided for {target!r}")

    return tuple(tag_list)
