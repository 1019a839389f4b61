"""Exceptions raised by the short link registry.

Classes:
    ShortlinkError:
        Generic base class for registry exceptions.

    ValidationError:
        Raised when a submitted URL is empty or malformed.

    NotFoundError:
        Raised when a short code is not registered.

    InternalError:
        Raised on unexpected failures in code generation or storage.

Example:
    >>> from shortlink.exceptions import NotFoundError
    >>> raise NotFoundError("Short URL not found")
    Traceback (most recent call last):
        ...
    shortlink.exceptions.NotFoundError: Short URL not found
"""


class ShortlinkError(Exception):
    """Generic base class for registry exceptions."""

    status_code = 500

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__


class ValidationError(ShortlinkError):
    """Exception raised when a submitted URL fails validation."""

    status_code = 400


class NotFoundError(ShortlinkError):
    """Exception raised when a short code is not present in the registry."""

    status_code = 404


class InternalError(ShortlinkError):
    """Exception raised when the generator or storage fails unexpectedly.

    The message is meant for server-side logs only.
    """
