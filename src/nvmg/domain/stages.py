"""Install pipeline stages."""

from enum import Enum


class InstallStage(Enum):
    """Stages an install passes through, in order.

    Any stage may transition directly to FAILED.
    """

    RESOLVING = "resolving"
    NAMING = "naming"
    DOWNLOADING = "downloading"
    EXTRACTING = "extracting"
    PLACING = "placing"
    DONE = "done"
    FAILED = "failed"
