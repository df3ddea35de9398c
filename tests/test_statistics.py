import math

import pandas as pd

from gradesheet import StudentRecord, Records, Classification, classify, compute_final
from gradesheet import statistics


def _graded():
    def student(surname, name, attendance, parcial1, parcial2, practicas):
        return StudentRecord(
            surname=surname,
            name=name,
            attendance=attendance,
            parcial1=parcial1,
            parcial2=parcial2,
            practicas=practicas,
        )

    return compute_final(
        [
            student("Alonso", "Marta", 80, 6, 7, 6.5),
            student("Ruiz", "Lucía", 90, 6, 8, 5),
            student("Zapata", "Hugo", 70, 9, 9, 9),
        ]
    )


# to_frame -----------------------------------------------------------------------------


def test_to_frame_has_one_row_per_record_indexed_by_surname():
    # when
    table = statistics.to_frame(_graded())

    # then
    assert list(table.index) == ["Alonso", "Ruiz", "Zapata"]
    assert table.loc["Ruiz", "name"] == "Lucía"
    assert table.loc["Zapata", "attendance"] == 70
    assert abs(table.loc["Ruiz", "final_grade"] - 6.2) < 1e-9


def test_to_frame_ungraded_records_have_nan_final_grade():
    # when
    table = statistics.to_frame([StudentRecord(surname="Ruiz")])

    # then
    assert pd.isna(table.loc["Ruiz", "final_grade"])


def test_to_frame_of_no_records_is_empty():
    # when
    table = statistics.to_frame([])

    # then
    assert len(table) == 0
    assert "final_grade" in table.columns


# outcomes / pass_rate -----------------------------------------------------------------


def test_outcomes_counts_passing_and_failing():
    # when
    counts = statistics.outcomes(classify(_graded()))

    # then
    assert counts["passing"] == 2
    assert counts["failing"] == 1


def test_pass_rate():
    assert statistics.pass_rate(classify(_graded())) == 2 / 3


def test_pass_rate_with_no_students_is_nan():
    assert math.isnan(statistics.pass_rate(Classification(Records(), Records())))
