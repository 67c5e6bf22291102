"""Error types raised by the request builder and its transport."""


class RequestBuilderError(Exception):
    """Base class for all request builder errors."""


class InvalidArgument(RequestBuilderError, ValueError):
    """Raised when a caller passes a missing or out-of-range argument."""


class TransportUnavailable(RequestBuilderError):
    """Raised when the transport cannot open a connection to the target."""


class IOFailure(RequestBuilderError):
    """Raised when connecting, writing the body or reading the response fails.

    The native transport error is kept as ``__cause__``.
    """
