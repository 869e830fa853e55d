"""Service-layer exceptions raised by ``AutoService``.

The controller translates these into HTTP status codes; nothing else
in the application needs to know about them.
"""


class AutoServiceError(Exception):
    """Base class for predictable auto service errors."""


class InvalidAutoException(AutoServiceError):
    """Raised when an auto submitted for creation is malformed."""


class InvalidUpdateAutoException(AutoServiceError):
    """Raised when an update payload carries nothing usable."""


class AutoNotFoundException(AutoServiceError):
    """Raised when no auto exists for the requested VIN."""
