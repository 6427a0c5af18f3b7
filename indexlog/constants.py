"""
Constants shared with the index lifecycle layer.

The action layer that moves an index through its lifecycle owns these
tags; records only store and compare them.
"""

from enum import Enum


class States(str, Enum):
    """Lifecycle tags written to IndexLogEntry.state."""

    ACTIVE = "ACTIVE"
    CREATING = "CREATING"
    DELETING = "DELETING"
    DELETED = "DELETED"
    REFRESHING = "REFRESHING"
    VACUUMING = "VACUUMING"
    RESTORING = "RESTORING"
    CANCELLING = "CANCELLING"
    OPTIMIZING = "OPTIMIZING"
    DOESNOTEXIST = "DOESNOTEXIST"

    def __str__(self) -> str:
        return self.value
