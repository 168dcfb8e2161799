class BaseAppException(Exception):
    """Base exception class for library-specific exceptions."""

    def __init__(self, message: str = None, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidResultError(BaseAppException):
    """Raised when a result is constructed with a contradictory success/error state."""

    pass


class RegistrationError(BaseAppException):
    """Base class for service registration and resolution errors."""

    pass


class UnknownLifetimeError(RegistrationError):
    """Raised when services are registered with an unsupported lifetime."""

    pass


class NoActiveScopeError(RegistrationError):
    """Raised when a scoped service is resolved outside of any scope."""

    pass
