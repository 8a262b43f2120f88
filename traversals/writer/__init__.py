"""
Writer
======

Logging as data: entries are accumulated into a `Log` and returned
alongside the outcome as a `WriterResult`, instead of going to a global
logger.
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
