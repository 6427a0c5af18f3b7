"""
Interface definitions for indexlog's collaborators.

The plan interfaces describe the external query engine; the logger
interface describes internal diagnostics.
"""

from .logger import ILogger
from .plan import IPlanHandle, IPlanSession

__all__ = [
    "ILogger",
    "IPlanHandle",
    "IPlanSession",
]
