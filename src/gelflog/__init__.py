"""gelflog public API."""

from .api import configure, get_client
from .core.client import GraylogClient
from .core.levels import Severity, UnsupportedSeverityError
from .core.record import GraylogRecord, IdentityFields, build_record
from .core.validation import ConfigurationError
from .version import __version__

__all__ = [
    "configure",
    "get_client",
    "GraylogClient",
    "GraylogRecord",
    "IdentityFields",
    "Severity",
    "ConfigurationError",
    "UnsupportedSeverityError",
    "build_record",
    "__version__",
]
