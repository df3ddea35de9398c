"""Deciding who passes the course."""

from typing import Iterable, NamedTuple, Optional

from .core import DEFAULT_OPTIONS, GradesheetOptions, Records, StudentRecord
from .grading import RetakeIfFailed, best_scores


class Classification(NamedTuple):
    """The result of :func:`classify`. Unpacks as ``(passing, failing)``."""

    passing: Records
    failing: Records


def is_passing(
    record: StudentRecord, *, options: Optional[GradesheetOptions] = None
) -> bool:
    """Whether the student passes the course.

    A student passes if their attendance, each of their effective assessment
    scores, and their final grade all meet the minimums in `options`. All
    minimums are inclusive.

    Unlike :func:`gradesheet.grading.compute_final`, a retake only counts here
    when the original score on that assessment was below the minimum score.

    The final grade is read from the record, not recomputed; a record that has
    not been graded is treated as having a final grade of 0.

    """
    if options is None:
        options = DEFAULT_OPTIONS

    scores = best_scores(record, RetakeIfFailed(options.min_score))
    final_grade = record.final_grade if record.final_grade is not None else 0.0

    return (
        record.attendance >= options.min_attendance
        and all(score >= options.min_score for score in scores)
        and final_grade >= options.min_final_grade
    )


def classify(
    records: Iterable[StudentRecord],
    *,
    options: Optional[GradesheetOptions] = None,
) -> Classification:
    """Split the records into students who pass and students who fail.

    Parameters
    ----------
    records : Iterable[StudentRecord]
        Graded records, as returned by :func:`gradesheet.grading.compute_final`.
    options : Optional[GradesheetOptions]
        Supplies the thresholds. Default:
        :data:`gradesheet.core.DEFAULT_OPTIONS`.

    Returns
    -------
    Classification
        The passing and failing records. Each keeps the input order, and
        every input record appears in exactly one of them.

    """
    passing = []
    failing = []
    for record in records:
        if is_passing(record, options=options):
            passing.append(record)
        else:
            failing.append(record)

    return Classification(Records(passing), Records(failing))
