"""barrelgen observability package.

Re-exports the logging classes for convenient access::

    from barrelgen.observability import ContextLogger, StdlibLoggerAdapter
"""

from barrelgen.observability.context_logger import (
    ContextLogger,
    ReportLogger,
    StdlibLoggerAdapter,
)

__all__ = [
    "ContextLogger",
    "ReportLogger",
    "StdlibLoggerAdapter",
]
