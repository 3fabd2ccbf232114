from lazyvalue.exceptions import (
    REQUIRED_LAZY_MESSAGE,
    REQUIRED_SUPPLIER_MESSAGE,
    InvalidArgumentError,
    MissingLazyError,
    MissingSupplierError,
)
from lazyvalue.factories import safe, unsafe
from lazyvalue.protocol import Lazy, require_lazy
from lazyvalue.value import LazyValue
from lazyvalue._version import __version__

__all__ = [
    "Lazy",
    "LazyValue",
    "safe",
    "unsafe",
    "require_lazy",
    "InvalidArgumentError",
    "MissingSupplierError",
    "MissingLazyError",
    "REQUIRED_SUPPLIER_MESSAGE",
    "REQUIRED_LAZY_MESSAGE",
    "__version__",
]
