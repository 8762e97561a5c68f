"""isoalign constants."""

import enum


class TaskStatus(str, enum.Enum):
    """Alignment task lifecycle states."""

    WAITING = "waiting"
    """The task was created but it has not started yet."""

    PROCESSING = "processing"
    """The task is running."""

    FINISHED = "finished"
    """The task completed and a result is available."""

    CANCELED = "canceled"
    """The task was canceled. No result is available."""

    ERROR = "error"
    """The task failed. No result is available."""


class RTToleranceMode(str, enum.Enum):
    """Define how the retention time tolerance is computed."""

    ABSOLUTE = "absolute"
    """The tolerance is a fixed retention time difference."""

    RELATIVE = "relative"
    """The tolerance is a fraction of the mean of the compared retention times."""


class MSInstrument(str, enum.Enum):
    """Available MS instrument types."""

    QTOF = "qtof"
    ORBITRAP = "orbitrap"


class SeparationMode(str, enum.Enum):
    """Analytical method separation platform."""

    HPLC = "HPLC"
    UPLC = "UPLC"


class Descriptor(str, enum.Enum):
    """Peak descriptors available in alignment results."""

    MZ = "mz"
    RT = "rt"
    HEIGHT = "height"
    AREA = "area"
