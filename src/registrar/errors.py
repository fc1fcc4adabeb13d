__all__ = ["RegistrarError", "InvalidRegistration", "NotFound", "InvalidRequest"]


class RegistrarError(Exception):
    """Base class for errors raised while registering or resolving components."""

    pass


class InvalidRegistration(RegistrarError):
    """Raised when a component has no usable tags or needs constructor arguments."""

    pass


class NotFound(RegistrarError, LookupError):
    """Raised when no component is registered under the requested tag or group."""

    pass


class InvalidRequest(RegistrarError, ValueError):
    """Raised when a resolve call names neither a tag nor a group, or both."""

    pass
