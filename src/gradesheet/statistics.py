"""Summary tables of a graded sheet."""

from typing import Iterable

import numpy as np
import pandas as pd

from .classify import Classification
from .core import StudentRecord

_COLUMNS = [
    "name",
    "parcial1",
    "parcial2",
    "practicas",
    "ordinario1",
    "ordinario2",
    "ordinario_practicas",
    "attendance",
    "final_grade",
]


def to_frame(records: Iterable[StudentRecord]) -> pd.DataFrame:
    """The typed fields of each record as a table.

    Parameters
    ----------
    records : Iterable[StudentRecord]
        The records to tabulate.

    Returns
    -------
    pd.DataFrame
        One row per record, in order, indexed by surname. Records that have
        not been graded have a `final_grade` of NaN.

    """
    rows = [
        {
            "surname": record.surname,
            **{column: getattr(record, column) for column in _COLUMNS},
        }
        for record in records
    ]
    table = pd.DataFrame(rows, columns=["surname"] + _COLUMNS).set_index("surname")
    table["final_grade"] = table["final_grade"].astype(float)
    return table


def outcomes(classification: Classification) -> pd.Series:
    """The number of students passing and failing.

    Returns
    -------
    pd.Series
        Indexed by ``"passing"`` and ``"failing"``.

    """
    return pd.Series(
        {
            "passing": len(classification.passing),
            "failing": len(classification.failing),
        },
        name="students",
    )


def pass_rate(classification: Classification) -> float:
    """The fraction of students who pass, or NaN if there are no students."""
    counts = outcomes(classification)
    total = counts.sum()
    if total == 0:
        return np.nan
    return float(counts["passing"] / total)
