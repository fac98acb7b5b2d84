"""Exceptions raised while handling a host event."""


class WatchbotError(Exception):
    """Base class for plugin errors."""


class InvalidEvent(WatchbotError):
    """The host delivered an event that cannot be decoded."""


class DependencyUnavailable(WatchbotError):
    """A host call (variable store or messaging) failed."""

    def __init__(self, operation, detail="", error_code=None):
        self.operation = operation
        self.error_code = error_code
        message = f"{operation} failed"
        if error_code is not None:
            message += f" (errorCode={error_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
