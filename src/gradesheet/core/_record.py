"""Represents one row of a grade sheet."""

import dataclasses
import types
import typing
from typing import Mapping, Optional

from .._util import parse_decimal, parse_percentage

# column names used by the grade sheet
SURNAME = "Apellidos"
NAME = "Nombre"
PARCIAL1 = "Parcial1"
PARCIAL2 = "Parcial2"
PRACTICAS = "Practicas"
ORDINARIO1 = "Ordinario1"
ORDINARIO2 = "Ordinario2"
ORDINARIO_PRACTICAS = "OrdinarioPracticas"
ATTENDANCE = "Asistencia"
FINAL_GRADE = "NotaFinal"

GRADED_COLUMNS = (
    PARCIAL1,
    PARCIAL2,
    PRACTICAS,
    ORDINARIO1,
    ORDINARIO2,
    ORDINARIO_PRACTICAS,
    ATTENDANCE,
)


@dataclasses.dataclass(frozen=True)
class StudentRecord:
    """A student's row in the grade sheet.

    Attributes
    ----------
    surname : str
        The student's surnames. The empty string if the sheet has no
        ``Apellidos`` column.
    name : Optional[str]
        The student's given name, or `None` if the sheet has no ``Nombre``
        column.
    parcial1, parcial2, practicas : float
        Scores on the two partial exams and the lab coursework.
    ordinario1, ordinario2, ordinario_practicas : float
        Scores on the corresponding retakes. Zero when not taken.
    attendance : float
        Attendance as a percentage between 0 and 100.
    final_grade : Optional[float]
        The weighted final grade. `None` until it has been computed by
        :func:`gradesheet.grading.compute_final`.
    fields : Mapping[str, str]
        Every cell of the row, keyed by column name, in the order of the
        header and exactly as read. Read-only.

    Scores that are missing or unparsable are 0.0.

    """

    surname: str = ""
    name: Optional[str] = None
    parcial1: float = 0.0
    parcial2: float = 0.0
    practicas: float = 0.0
    ordinario1: float = 0.0
    ordinario2: float = 0.0
    ordinario_practicas: float = 0.0
    attendance: float = 0.0
    final_grade: Optional[float] = None
    fields: Mapping[str, str] = dataclasses.field(default_factory=dict, compare=False)

    def __post_init__(self):
        # copied, and read-only
        object.__setattr__(self, "fields", types.MappingProxyType(dict(self.fields)))

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> "StudentRecord":
        """Build a record from a mapping of column name to cell."""
        fields = dict(fields)
        return cls(
            surname=fields.get(SURNAME, ""),
            name=fields.get(NAME),
            parcial1=parse_decimal(fields.get(PARCIAL1)),
            parcial2=parse_decimal(fields.get(PARCIAL2)),
            practicas=parse_decimal(fields.get(PRACTICAS)),
            ordinario1=parse_decimal(fields.get(ORDINARIO1)),
            ordinario2=parse_decimal(fields.get(ORDINARIO2)),
            ordinario_practicas=parse_decimal(fields.get(ORDINARIO_PRACTICAS)),
            attendance=parse_percentage(fields.get(ATTENDANCE)),
            fields=fields,
        )

    @property
    def extra(self) -> typing.Dict[str, str]:
        """The cells that are displayed but not used to grade."""
        return {
            column: value
            for column, value in self.fields.items()
            if column not in GRADED_COLUMNS
        }

    def as_dict(self) -> typing.Dict[str, typing.Union[str, float]]:
        """The full row, plus ``NotaFinal`` once the final grade is known."""
        dct: typing.Dict[str, typing.Union[str, float]] = dict(self.fields)
        if self.final_grade is not None:
            dct[FINAL_GRADE] = self.final_grade
        return dct

    def __str__(self):
        return str(self.as_dict())


class Records(typing.Sequence[StudentRecord]):
    """An immutable sequence of :class:`StudentRecord` instances.

    Behaves like a tuple of records, but also provides a :meth:`find` method
    that looks up a student by (part of) their name.

    """

    def __init__(self, records: typing.Iterable[StudentRecord] = ()):
        self._records = tuple(records)

    def __getitem__(self, ix):
        if isinstance(ix, slice):
            return self.__class__(self._records[ix])
        return self._records[ix]

    def __len__(self):
        return len(self._records)

    def __eq__(self, other):
        if isinstance(other, Records):
            return self._records == other._records
        if isinstance(other, (list, tuple)):
            return self._records == tuple(other)
        return NotImplemented

    def __repr__(self):
        return f"Records({list(self._records)!r})"

    def find(self, pattern: str) -> StudentRecord:
        """Finds a record from a substring of the student's full name.

        The full name is ``"<surname>, <name>"`` and the search is
        case-insensitive.

        Raises
        ------
        ValueError
            If no record matches, or if more than one record matches.

        """

        def is_match(record):
            full_name = f"{record.surname}, {record.name or ''}"
            return pattern.lower() in full_name.lower()

        matches = [r for r in self._records if is_match(r)]

        if len(matches) == 0:
            raise ValueError(f"No names matched {pattern}.")

        if len(matches) > 1:
            names = [f"{r.surname}, {r.name}" for r in matches]
            raise ValueError(f'More than one name matched "{pattern}": {names}')

        return matches[0]
