"""A package for producing pass/fail reports from course grade sheets."""

from .core import (
    StudentRecord,
    Records,
    GradesheetOptions,
    DEFAULT_OPTIONS,
)

from .grading import compute_final, TakeBest, RetakeIfFailed
from .classify import classify, is_passing, Classification

from . import io
from . import reports
from . import statistics

__all__ = [
    "StudentRecord",
    "Records",
    "GradesheetOptions",
    "DEFAULT_OPTIONS",
    "compute_final",
    "TakeBest",
    "RetakeIfFailed",
    "classify",
    "is_passing",
    "Classification",
    "io",
    "reports",
    "statistics",
]
