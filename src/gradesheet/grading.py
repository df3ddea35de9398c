"""Computing final grades."""

import dataclasses
from typing import Callable, Iterable, NamedTuple, Optional

from .core import DEFAULT_OPTIONS, GradesheetOptions, Records, StudentRecord

RetakePolicy = Callable[[float, float], float]


class TakeBest:
    """The better of the original score and the retake score."""

    def __call__(self, original: float, retake: float) -> float:
        return max(original, retake)

    def __repr__(self):
        return "TakeBest()"


class RetakeIfFailed:
    """The original score, unless it is failing.

    When the original score is below `threshold`, the better of the original
    and the retake is used instead.

    """

    def __init__(self, threshold: float = 4.0):
        self.threshold = threshold

    def __call__(self, original: float, retake: float) -> float:
        if original < self.threshold:
            return max(original, retake)
        return original

    def __repr__(self):
        return f"RetakeIfFailed(threshold={self.threshold!r})"


class EffectiveScores(NamedTuple):
    parcial1: float
    parcial2: float
    practicas: float


def best_scores(record: StudentRecord, policy: RetakePolicy) -> EffectiveScores:
    """Combine each assessment with its retake according to `policy`."""
    return EffectiveScores(
        parcial1=policy(record.parcial1, record.ordinario1),
        parcial2=policy(record.parcial2, record.ordinario2),
        practicas=policy(record.practicas, record.ordinario_practicas),
    )


def compute_final(
    records: Iterable[StudentRecord],
    *,
    options: Optional[GradesheetOptions] = None,
) -> Records:
    """Compute the final grade of every record.

    The final grade is the weighted sum of the best score on each assessment,
    where the best score is the maximum of the original and the retake. The
    retake counts even when the original was already passing.

    Parameters
    ----------
    records : Iterable[StudentRecord]
        The records to grade. They are not modified.
    options : Optional[GradesheetOptions]
        Supplies the weights. Default: :data:`gradesheet.core.DEFAULT_OPTIONS`.

    Returns
    -------
    Records
        New records, in the same order, with `final_grade` set. The grade is
        not rounded.

    """
    if options is None:
        options = DEFAULT_OPTIONS

    w1, w2, w3 = options.weights
    policy = TakeBest()

    def _with_final_grade(record):
        scores = best_scores(record, policy)
        # the order of the terms matters, since the sum is not rounded
        final_grade = float(
            w1 * scores.parcial1 + w2 * scores.parcial2 + w3 * scores.practicas
        )
        return dataclasses.replace(record, final_grade=final_grade)

    return Records(_with_final_grade(record) for record in records)
