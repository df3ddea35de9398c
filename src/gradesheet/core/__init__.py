from ._record import StudentRecord, Records
from ._options import GradesheetOptions, DEFAULT_OPTIONS

__all__ = [
    "StudentRecord",
    "Records",
    "GradesheetOptions",
    "DEFAULT_OPTIONS",
]
