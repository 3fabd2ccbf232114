"""Exceptions for lazy value construction and validation.

Every argument error raised by this package is an ``InvalidArgumentError``.
Errors raised by a wrapped supplier are never converted into one of these;
they propagate from ``get()`` unchanged.
"""

#: Message carried by ``MissingSupplierError`` when no supplier is given.
REQUIRED_SUPPLIER_MESSAGE = "Supplier is required but None given"

#: Default message carried by ``MissingLazyError`` from ``require_lazy``.
REQUIRED_LAZY_MESSAGE = "Lazy is required but None given"


class InvalidArgumentError(ValueError):
    """Base exception for a required argument that is absent or unusable.

    Attributes:
        message: Human-readable description of the failure. May be None when
            a caller explicitly asked for no message.
    """

    def __init__(self, message: str | None) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return "" if self.message is None else self.message


class MissingSupplierError(InvalidArgumentError):
    """Raised when a lazy value is constructed without a supplier."""

    DEFAULT_MESSAGE = REQUIRED_SUPPLIER_MESSAGE

    def __init__(self, message: str | None = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class MissingLazyError(InvalidArgumentError):
    """Raised by ``require_lazy`` when the checked lazy value is None."""

    DEFAULT_MESSAGE = REQUIRED_LAZY_MESSAGE

    def __init__(self, message: str | None = DEFAULT_MESSAGE) -> None:
        super().__init__(message)
