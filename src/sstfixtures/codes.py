"""Writer stage constants for per-file outcomes.

These constants prevent stringly-typed stage names and ensure
reports and diagnostics use the same labels.
"""

from enum import Enum


class WriterStage(str, Enum):
    """Stage of the table writer at which a fixture failed."""

    CONFIGURE = "CONFIGURE"  # building writer options from the combination
    OPEN = "OPEN"
    PUT = "PUT"
    FINISH = "FINISH"
